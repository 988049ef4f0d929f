"""
Reusable seed data functions for database initialization.

Member types are fixed reference data: the API exposes them read-only, so
they are inserted here (and by the initial migration) rather than through
GraphQL mutations.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import MemberTypes
from ..logging import get_logger

logger = get_logger(__name__)

MEMBER_TYPE_SEED: tuple[dict[str, Any], ...] = (
    {"id": "basic", "discount": 2.3, "posts_limit_per_month": 20},
    {"id": "business", "discount": 7.7, "posts_limit_per_month": 100},
)


async def ensure_member_types(db: AsyncSession) -> int:
    """
    Ensure every seeded member type exists in the database.

    Existing rows are left untouched, so running this repeatedly is safe.

    Args:
        db: Database session

    Returns:
        Number of member types inserted
    """
    result = await db.execute(select(MemberTypes.id))
    existing = set(result.scalars().all())

    created = 0
    for row in MEMBER_TYPE_SEED:
        if row["id"] in existing:
            logger.debug("Member type already exists", member_type_id=row["id"])
            continue
        db.add(MemberTypes(**row))
        created += 1

    if created:
        await db.flush()
        logger.info("Seeded member types", created=created)

    return created
