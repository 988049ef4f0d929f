"""
Store capability and its implementations
"""

from ..config import settings
from .base import EntityKind, Record, RecordNotFoundError, Store, StoreError
from .memory import InMemoryStore
from .sql import SqlAlchemyStore


def create_store(backend: str | None = None) -> Store:
    """Build the store selected by configuration."""
    backend = (backend or settings.store_backend).lower()
    if backend == "memory":
        return InMemoryStore()
    if backend == "sqlalchemy":
        return SqlAlchemyStore()
    raise ValueError(f"Unknown store backend: {backend}")


__all__ = [
    "EntityKind",
    "InMemoryStore",
    "Record",
    "RecordNotFoundError",
    "SqlAlchemyStore",
    "Store",
    "StoreError",
    "create_store",
]
