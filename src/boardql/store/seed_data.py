"""
Demo records loaded into a fresh store at startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import get_logger

if TYPE_CHECKING:
    from .memory import InMemoryStore

logger = get_logger(__name__)

DEMO_USERS: list[dict[str, str]] = [
    {"id": "1", "first_name": "Lee", "last_name": "SM"},
    {"id": "2", "first_name": "Kim", "last_name": "DU"},
]

# Board "2" points at a user that does not exist.
DEMO_BOARDS: list[dict[str, str]] = [
    {"id": "1", "title": "title1", "content": "content1", "user_id": "1"},
    {"id": "2", "title": "title2", "content": "content2", "user_id": "3"},
]


def seed_demo_data(store: InMemoryStore) -> None:
    """Load the demo users and boards into ``store``.

    Ids are preserved, so the store's next allocated board id follows the
    highest seeded one.
    """
    for user in DEMO_USERS:
        store.add_user(**user)

    for board in DEMO_BOARDS:
        store.add_board(**board)

    logger.info(
        "Demo data seeded",
        users=len(DEMO_USERS),
        boards=len(DEMO_BOARDS),
    )
