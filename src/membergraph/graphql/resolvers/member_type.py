from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import EntityKind, Record
from ..context import get_store
from ..scalars import MemberTypeId

if TYPE_CHECKING:
    from ..types.member_type import MemberType
    from ..types.profile import Profile

logger = get_logger(__name__)


def to_member_type(record: Record) -> MemberType:
    """Convert a store record to the MemberType GraphQL type."""
    from ..types.member_type import MemberType as MemberTypeType

    return MemberTypeType(
        id=MemberTypeId(record["id"]),
        discount=record["discount"],
        posts_limit_per_month=record["posts_limit_per_month"],
    )


async def resolve_member_type_by_id(info: strawberry.Info, id: MemberTypeId) -> MemberType | None:
    record = await get_store(info).find_one(EntityKind.MEMBER_TYPE, id.value)
    if record is None:
        logger.info("Member type not found", member_type_id=id.value)
        return None
    return to_member_type(record)


async def resolve_member_types(info: strawberry.Info) -> list[MemberType]:
    records = await get_store(info).find_all(EntityKind.MEMBER_TYPE)
    return [to_member_type(record) for record in records]


async def resolve_member_type_profiles(
    member_type: MemberType, info: strawberry.Info
) -> list[Profile]:
    from .profile import to_profile

    records = await get_store(info).find_many(
        EntityKind.PROFILE, "member_type_id", member_type.id.value
    )
    return [to_profile(record) for record in records]
