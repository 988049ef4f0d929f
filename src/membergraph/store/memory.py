"""
In-memory store, used by tests and by local runs without a database.
"""

from copy import deepcopy
from typing import Any
from uuid import UUID, uuid4

from ..database.seed_data import MEMBER_TYPE_SEED
from ..logging import get_logger
from .base import EntityKind, Record, RecordNotFoundError, Store

logger = get_logger(__name__)


class InMemoryStore(Store):
    """Dictionary-backed store seeded with the fixed member types.

    Records are copied on the way in and out so callers cannot mutate stored
    state. Identifiers are generated for every kind except member types, whose
    identifiers are part of the seed.
    """

    def __init__(self, seed_member_types: bool = True):
        self._tables: dict[EntityKind, dict[Any, Record]] = {kind: {} for kind in EntityKind}
        if seed_member_types:
            for row in MEMBER_TYPE_SEED:
                self._tables[EntityKind.MEMBER_TYPE][row["id"]] = dict(row)

    @staticmethod
    def _key(kind: EntityKind, id: UUID | str) -> Any:
        if kind is EntityKind.MEMBER_TYPE:
            return str(id)
        return id if isinstance(id, UUID) else UUID(str(id))

    async def find_one(self, kind: EntityKind, id: UUID | str) -> Record | None:
        record = self._tables[kind].get(self._key(kind, id))
        return deepcopy(record) if record is not None else None

    async def find_all(self, kind: EntityKind) -> list[Record]:
        return [deepcopy(record) for record in self._tables[kind].values()]

    async def find_many(self, kind: EntityKind, field: str, value: Any) -> list[Record]:
        return [
            deepcopy(record) for record in self._tables[kind].values() if record.get(field) == value
        ]

    async def create(self, kind: EntityKind, data: Record) -> Record:
        record = dict(data)
        if kind is not EntityKind.MEMBER_TYPE:
            record["id"] = uuid4()
        self._tables[kind][self._key(kind, record["id"])] = record
        logger.debug("Record created", kind=kind.value, record_id=str(record["id"]))
        return deepcopy(record)

    async def delete(self, kind: EntityKind, id: UUID | str) -> Record:
        record = self._tables[kind].pop(self._key(kind, id), None)
        if record is None:
            raise RecordNotFoundError(kind, id)
        logger.debug("Record deleted", kind=kind.value, record_id=str(id))
        return record
