"""
Stored record shapes
"""

from pydantic import BaseModel, ConfigDict


class UserRecord(BaseModel):
    """A stored user. ``full_name`` is derived at read time, never stored."""

    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str
    last_name: str


class BoardRecord(BaseModel):
    """A stored board.

    ``user_id`` references a ``UserRecord.id`` but is not enforced; a board
    may point at a user that does not exist.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str | None = None
    user_id: str | None = None
