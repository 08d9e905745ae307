"""
Root GraphQL query definitions
"""

import strawberry

from ..types.board import Board
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def all_users(self, info: strawberry.Info) -> list[User]:
        """Get every user."""
        from ..resolvers.user import resolve_all_users

        return await resolve_all_users(info)

    @strawberry.field
    async def all_boards(self, info: strawberry.Info) -> list[Board]:
        """Get every board."""
        from ..resolvers.board import resolve_all_boards

        return await resolve_all_boards(info)

    @strawberry.field
    async def board(self, info: strawberry.Info, id: strawberry.ID) -> Board | None:
        """Get a board by ID."""
        from ..resolvers.board import resolve_board_by_id

        return await resolve_board_by_id(info, str(id))
