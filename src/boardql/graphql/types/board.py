"""
Board GraphQL type definitions
"""

import strawberry

from .user import User


@strawberry.type
class Board:
    """Board type for GraphQL API."""

    id: strawberry.ID
    title: str
    content: str | None
    user_id: strawberry.Private[str | None]

    @strawberry.field
    async def author(self, info: strawberry.Info) -> User | None:
        """Get the user who wrote this board, if they exist."""
        from ..resolvers.board import resolve_board_author

        return await resolve_board_author(self, info)
