"""
In-memory storage for users and boards
"""

from .memory import InMemoryStore
from .models import BoardRecord, UserRecord
from .seed_data import seed_demo_data

__all__ = [
    "InMemoryStore",
    "BoardRecord",
    "UserRecord",
    "seed_demo_data",
]
