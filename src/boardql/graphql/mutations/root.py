"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.board import Board


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="postBoard")
    async def post_board(
        self,
        info: strawberry.Info,
        title: str,
        author: strawberry.ID,
        content: str | None = None,
    ) -> Board:
        """Create a new board written by ``author``."""
        from ..resolvers.board import post_board

        return await post_board(info, title, content, str(author))

    @strawberry.mutation(name="deleteBoard")
    async def delete_board(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a board. Returns False when it does not exist."""
        from ..resolvers.board import delete_board

        return await delete_board(info, str(id))
