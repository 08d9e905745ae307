"""
Configuration management for the BoardQL server
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOARDQL_",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphiql: bool = True  # Serve the GraphiQL IDE on GET /graphql

    # Store
    seed_data: bool = True  # Load the demo users and boards at startup

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
