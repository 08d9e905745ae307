#!/usr/bin/env python3
"""
Main CLI entry point for the BoardQL server.
"""

import os
import sys

import click
import uvicorn

from boardql import __version__
from boardql.config import settings
from boardql.logging import configure_logging, get_logger

logger = get_logger(__name__)


def display_url(host: str, port: int) -> str:
    """Address a client should use to reach the GraphQL endpoint."""
    shown_host = "localhost" if host in ("0.0.0.0", "::") else host
    return f"http://{shown_host}:{port}/graphql"


@click.group()
@click.version_option(version=__version__, prog_name="boardql")
def cli() -> None:
    """BoardQL CLI - run the server and inspect the schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    show_default=True,
    help="Log level",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the BoardQL API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    # create_app reads these when uvicorn calls the factory
    os.environ["BOARDQL_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["BOARDQL_DEBUG"] = "true"

    logger.info(
        "Starting BoardQL API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )
    logger.info(f"Running on {display_url(host, port)}")

    try:
        uvicorn.run(
            "boardql.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("schema")
def print_schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from boardql.graphql.schema import schema

    click.echo(schema.as_str())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
