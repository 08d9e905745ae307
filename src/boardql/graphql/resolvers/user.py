from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from ..converters import user_to_gql

if TYPE_CHECKING:
    from ..types.user import User

logger = get_logger(__name__)


async def resolve_all_users(info: strawberry.Info) -> list[User]:
    logger.debug("all users called")
    store = get_store_from_info(info)
    return [user_to_gql(user) for user in store.list_users()]


def resolve_user_full_name(user: User) -> str:
    logger.debug("full name called", user_id=str(user.id))
    return f"{user.first_name} {user.last_name}"
