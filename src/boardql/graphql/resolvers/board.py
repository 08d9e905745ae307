from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from ..converters import board_to_gql, user_to_gql

if TYPE_CHECKING:
    from ..types.board import Board
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_all_boards(info: strawberry.Info) -> list[Board]:
    store = get_store_from_info(info)
    return [board_to_gql(board) for board in store.list_boards()]


async def resolve_board_by_id(info: strawberry.Info, id: str) -> Board | None:
    """
    Resolve a board by its ID.

    A missing board is not an error; the field is nullable.
    """
    store = get_store_from_info(info)
    board = store.get_board(id)
    if board is None:
        logger.info("Board not found", board_id=id)
        return None

    return board_to_gql(board)


# Mutation resolvers
async def post_board(
    info: strawberry.Info,
    title: str,
    content: str | None,
    author: str,
) -> Board:
    """
    Create a new board.

    ``author`` is stored as the board's user id without checking that the
    user exists; an unknown author resolves to null on read.
    """
    store = get_store_from_info(info)
    board = store.add_board(title=title, content=content, user_id=author)

    logger.info("Board created", board_id=board.id, user_id=author)

    return board_to_gql(board)


async def delete_board(info: strawberry.Info, id: str) -> bool:
    """
    Delete a board.

    Returns False, leaving the store untouched, when no board has this ID.
    """
    store = get_store_from_info(info)
    if not store.remove_board(id):
        logger.info("Board not found for deletion", board_id=id)
        return False

    logger.info("Board deleted", board_id=id)
    return True


# Field resolvers
async def resolve_board_author(board: Board, info: strawberry.Info) -> User | None:
    logger.debug("author called", board_id=str(board.id), user_id=board.user_id)
    if board.user_id is None:
        return None

    store = get_store_from_info(info)
    user = store.get_user(board.user_id)
    if user is None:
        return None

    return user_to_gql(user)
