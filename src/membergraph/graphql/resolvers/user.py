from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ...logging import get_logger
from ...store import EntityKind, Record
from ..context import get_store

if TYPE_CHECKING:
    from ..mutations.root import CreateUserInput
    from ..types.post import Post
    from ..types.profile import Profile
    from ..types.user import User

logger = get_logger(__name__)


def to_user(record: Record) -> User:
    """Convert a store record to the User GraphQL type."""
    from ..types.user import User as UserType

    return UserType(id=record["id"], name=record["name"], balance=record["balance"])


# Query resolvers
async def resolve_user_by_id(info: strawberry.Info, id: UUID) -> User | None:
    """Resolve a user by its ID; a missing user resolves to null."""
    record = await get_store(info).find_one(EntityKind.USER, id)
    if record is None:
        logger.info("User not found", user_id=str(id))
        return None
    return to_user(record)


async def resolve_users(info: strawberry.Info) -> list[User]:
    records = await get_store(info).find_all(EntityKind.USER)
    return [to_user(record) for record in records]


# Field resolvers
async def resolve_user_profile(user: User, info: strawberry.Info) -> Profile | None:
    from .profile import to_profile

    records = await get_store(info).find_many(EntityKind.PROFILE, "user_id", user.id)
    return to_profile(records[0]) if records else None


async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    from .post import to_post

    records = await get_store(info).find_many(EntityKind.POST, "author_id", user.id)
    return [to_post(record) for record in records]


# Mutation resolvers
async def create_user(info: strawberry.Info, dto: CreateUserInput) -> User:
    record = await get_store(info).create(
        EntityKind.USER, {"name": dto.name, "balance": dto.balance}
    )
    return to_user(record)


async def delete_user(info: strawberry.Info, id: UUID) -> UUID:
    """Delete a user, returning its ID.

    Posts and profile of the user are not touched here; whether the delete
    succeeds with dependents present is up to the database.
    """
    record = await get_store(info).delete(EntityKind.USER, id)
    return record["id"]
