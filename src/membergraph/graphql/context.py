"""
GraphQL request context helpers
"""

from typing import Any

import strawberry

from ..store import Store


def build_context(store: Store, **extra: Any) -> dict[str, Any]:
    """Build the context dict handed to every resolver."""
    return {"store": store, **extra}


def get_store(info: strawberry.Info) -> Store:
    """Return the store injected into the request context."""
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("No store configured in GraphQL context")
    return store
