"""
Per-request GraphQL context helpers
"""

from typing import TYPE_CHECKING, Any

import strawberry

if TYPE_CHECKING:
    from ..store import InMemoryStore


def build_context(store: "InMemoryStore", **extra: Any) -> dict[str, Any]:
    """Assemble the context dict handed to every resolver."""
    return {"store": store, **extra}


def get_store_from_info(info: strawberry.Info) -> "InMemoryStore":
    """
    Extract the store from the GraphQL info object.

    Raises:
        RuntimeError: If the executing context carries no store
    """
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("Store not found in GraphQL context")
    return store
