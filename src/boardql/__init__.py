"""
BoardQL
In-memory GraphQL server for users and boards
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
