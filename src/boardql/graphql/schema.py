"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..logging import get_logger
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core's structural validation and an introspection query so
    a broken schema stops the server from starting.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The store is read from ``request.app.state.store`` on every request, so
    each application instance serves its own data.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(request.app.state.store, request=request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
