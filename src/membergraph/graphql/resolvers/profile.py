from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ...logging import get_logger
from ...store import EntityKind, Record
from ..context import get_store
from ..scalars import MemberTypeId

if TYPE_CHECKING:
    from ..mutations.root import CreateProfileInput
    from ..types.member_type import MemberType
    from ..types.profile import Profile
    from ..types.user import User

logger = get_logger(__name__)


def to_profile(record: Record) -> Profile:
    """Convert a store record to the Profile GraphQL type."""
    from ..types.profile import Profile as ProfileType

    return ProfileType(
        id=record["id"],
        is_member=record["is_member"],
        years_of_experience=record["years_of_experience"],
        user_id=record["user_id"],
        member_type_id=MemberTypeId(record["member_type_id"]),
    )


async def resolve_profile_by_id(info: strawberry.Info, id: UUID) -> Profile | None:
    record = await get_store(info).find_one(EntityKind.PROFILE, id)
    if record is None:
        logger.info("Profile not found", profile_id=str(id))
        return None
    return to_profile(record)


async def resolve_profiles(info: strawberry.Info) -> list[Profile]:
    records = await get_store(info).find_all(EntityKind.PROFILE)
    return [to_profile(record) for record in records]


async def resolve_profile_user(profile: Profile, info: strawberry.Info) -> User | None:
    from .user import to_user

    record = await get_store(info).find_one(EntityKind.USER, profile.user_id)
    return to_user(record) if record is not None else None


async def resolve_profile_member_type(
    profile: Profile, info: strawberry.Info
) -> MemberType | None:
    from .member_type import to_member_type

    record = await get_store(info).find_one(
        EntityKind.MEMBER_TYPE, profile.member_type_id.value
    )
    return to_member_type(record) if record is not None else None


async def create_profile(info: strawberry.Info, dto: CreateProfileInput) -> Profile:
    """Create a profile from the input verbatim.

    The referenced user and member type are checked by the database's
    foreign keys, not here.
    """
    record = await get_store(info).create(
        EntityKind.PROFILE,
        {
            "is_member": dto.is_member,
            "years_of_experience": dto.years_of_experience,
            "user_id": dto.user_id,
            "member_type_id": dto.member_type_id.value,
        },
    )
    return to_profile(record)


async def delete_profile(info: strawberry.Info, id: UUID) -> UUID:
    record = await get_store(info).delete(EntityKind.PROFILE, id)
    return record["id"]
