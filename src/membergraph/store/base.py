"""
Store capability used by the GraphQL resolvers.

Resolvers never talk to the ORM directly; they call one of the operations
below, parameterized by the kind of entity. Records are plain dictionaries
keyed by snake_case column names.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any
from uuid import UUID

Record = dict[str, Any]


class EntityKind(str, Enum):
    """Entities the store knows how to persist."""

    USER = "user"
    POST = "post"
    PROFILE = "profile"
    MEMBER_TYPE = "member_type"


class StoreError(Exception):
    """Base class for errors raised by a store."""


class RecordNotFoundError(StoreError):
    """Raised when an operation targets a record that does not exist."""

    def __init__(self, kind: EntityKind, id: UUID | str):
        self.kind = kind
        self.id = id
        super().__init__(f"Record to delete does not exist: {kind.value} {id}")


class Store(ABC):
    """Data store operations, one set per entity kind."""

    @abstractmethod
    async def find_one(self, kind: EntityKind, id: UUID | str) -> Record | None:
        """Return the record with the given identifier, or None."""

    @abstractmethod
    async def find_all(self, kind: EntityKind) -> list[Record]:
        """Return every record of the given kind."""

    @abstractmethod
    async def find_many(self, kind: EntityKind, field: str, value: Any) -> list[Record]:
        """Return records whose ``field`` equals ``value``."""

    @abstractmethod
    async def create(self, kind: EntityKind, data: Record) -> Record:
        """Persist a new record and return it with its assigned identifier."""

    @abstractmethod
    async def delete(self, kind: EntityKind, id: UUID | str) -> Record:
        """Delete a record and return it.

        Raises:
            RecordNotFoundError: If no record has the given identifier
        """
