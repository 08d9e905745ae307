"""
Main FastAPI application for the BoardQL server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import InMemoryStore

logger = get_logger(__name__)


def create_store(app_settings: Settings) -> InMemoryStore:
    """Create the store owned by one application instance."""
    if app_settings.seed_data:
        return InMemoryStore.seeded()
    return InMemoryStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: InMemoryStore = app.state.store
    logger.info(
        "Starting BoardQL API...",
        users=len(store.list_users()),
        boards=len(store.list_boards()),
    )

    yield

    logger.info("Shutting down BoardQL API...")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    # Re-read BOARDQL_* on every call
    app_settings = app_settings or Settings()
    configure_logging(debug=app_settings.debug, log_level=app_settings.log_level)

    app = FastAPI(
        title="BoardQL API",
        description="In-memory GraphQL server for users and boards",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.store = create_store(app_settings)

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    try:
        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(graphiql=app_settings.graphiql), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app
