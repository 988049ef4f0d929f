"""
SQLAlchemy-backed store.

Every operation runs in its own session from the shared async pool, so
resolvers in one GraphQL document never share a transaction.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import inspect, select

from ..database.connection import get_async_session
from ..dbmodels import Base, MemberTypes, Posts, Profiles, Users
from ..logging import get_logger
from .base import EntityKind, Record, RecordNotFoundError, Store

logger = get_logger(__name__)

MODELS: dict[EntityKind, type[Base]] = {
    EntityKind.USER: Users,
    EntityKind.POST: Posts,
    EntityKind.PROFILE: Profiles,
    EntityKind.MEMBER_TYPE: MemberTypes,
}


def to_record(row: Base) -> Record:
    """Copy the column attributes of an ORM instance into a plain dict."""
    return {attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs}


class SqlAlchemyStore(Store):
    """Store implementation over the application's async SQLAlchemy engine."""

    async def find_one(self, kind: EntityKind, id: UUID | str) -> Record | None:
        async with get_async_session() as session:
            row = await session.get(MODELS[kind], id)
            return to_record(row) if row is not None else None

    async def find_all(self, kind: EntityKind) -> list[Record]:
        async with get_async_session() as session:
            result = await session.execute(select(MODELS[kind]))
            return [to_record(row) for row in result.scalars().all()]

    async def find_many(self, kind: EntityKind, field: str, value: Any) -> list[Record]:
        model = MODELS[kind]
        async with get_async_session() as session:
            result = await session.execute(select(model).where(getattr(model, field) == value))
            return [to_record(row) for row in result.scalars().all()]

    async def create(self, kind: EntityKind, data: Record) -> Record:
        async with get_async_session() as session:
            row = MODELS[kind](**data)
            session.add(row)
            await session.flush()
            await session.refresh(row)
            record = to_record(row)

        logger.info("Record created", kind=kind.value, record_id=str(record["id"]))
        return record

    async def delete(self, kind: EntityKind, id: UUID | str) -> Record:
        async with get_async_session() as session:
            row = await session.get(MODELS[kind], id)
            if row is None:
                logger.info("Record to delete not found", kind=kind.value, record_id=str(id))
                raise RecordNotFoundError(kind, id)

            record = to_record(row)
            await session.delete(row)

        logger.info("Record deleted", kind=kind.value, record_id=str(id))
        return record
