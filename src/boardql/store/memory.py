"""
Process-local store holding users and boards keyed by id
"""

from __future__ import annotations

from ..logging import get_logger
from .models import BoardRecord, UserRecord

logger = get_logger(__name__)


class InMemoryStore:
    """Owns the user and board collections for one application instance.

    Collections are dicts keyed by id, so iteration follows insertion order.
    Ids come from per-collection high-water marks that only move forward:
    deleting a record never frees its id for reuse.

    None of the methods await, so each call completes without interleaving
    when driven from a single event loop.
    """

    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}
        self._boards: dict[str, BoardRecord] = {}
        self._last_user_id = 0
        self._last_board_id = 0

    @classmethod
    def seeded(cls) -> InMemoryStore:
        """Create a store pre-loaded with the demo users and boards."""
        from .seed_data import seed_demo_data

        store = cls()
        seed_demo_data(store)
        return store

    # Users
    def list_users(self) -> list[UserRecord]:
        return list(self._users.values())

    def get_user(self, id: str) -> UserRecord | None:
        return self._users.get(id)

    def add_user(self, first_name: str, last_name: str, id: str | None = None) -> UserRecord:
        """Store a new user, allocating an id unless one is given.

        Raises:
            ValueError: If ``id`` is already taken.
        """
        if id is None:
            self._last_user_id += 1
            id = str(self._last_user_id)
        elif id in self._users:
            raise ValueError(f"User id already exists: {id}")
        elif id.isascii() and id.isdigit():
            self._last_user_id = max(self._last_user_id, int(id))

        user = UserRecord(id=id, first_name=first_name, last_name=last_name)
        self._users[id] = user
        return user

    # Boards
    def list_boards(self) -> list[BoardRecord]:
        return list(self._boards.values())

    def get_board(self, id: str) -> BoardRecord | None:
        return self._boards.get(id)

    def add_board(
        self,
        title: str,
        content: str | None = None,
        user_id: str | None = None,
        id: str | None = None,
    ) -> BoardRecord:
        """Store a new board, allocating an id unless one is given.

        Raises:
            ValueError: If ``id`` is already taken.
        """
        if id is None:
            self._last_board_id += 1
            id = str(self._last_board_id)
        elif id in self._boards:
            raise ValueError(f"Board id already exists: {id}")
        elif id.isascii() and id.isdigit():
            self._last_board_id = max(self._last_board_id, int(id))

        board = BoardRecord(id=id, title=title, content=content, user_id=user_id)
        self._boards[id] = board

        logger.debug("Board stored", board_id=id, user_id=user_id)
        return board

    def remove_board(self, id: str) -> bool:
        """Remove the board with ``id``. Returns False when there is none."""
        if self._boards.pop(id, None) is None:
            return False

        logger.debug("Board removed", board_id=id)
        return True
