"""
Converters between stored records and GraphQL types.
"""

from __future__ import annotations

import strawberry

from ..store.models import BoardRecord, UserRecord
from .types.board import Board
from .types.user import User


def user_to_gql(user: UserRecord) -> User:
    """Convert a stored user to the GraphQL User type."""
    return User(
        id=strawberry.ID(user.id),
        first_name=user.first_name,
        last_name=user.last_name,
    )


def board_to_gql(board: BoardRecord) -> Board:
    """Convert a stored board to the GraphQL Board type."""
    return Board(
        id=strawberry.ID(board.id),
        title=board.title,
        content=board.content,
        user_id=board.user_id,
    )
