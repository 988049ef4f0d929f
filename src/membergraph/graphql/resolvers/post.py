from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ...logging import get_logger
from ...store import EntityKind, Record
from ..context import get_store

if TYPE_CHECKING:
    from ..mutations.root import CreatePostInput
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


def to_post(record: Record) -> Post:
    """Convert a store record to the Post GraphQL type."""
    from ..types.post import Post as PostType

    return PostType(
        id=record["id"],
        title=record["title"],
        content=record["content"],
        author_id=record["author_id"],
    )


async def resolve_post_by_id(info: strawberry.Info, id: UUID) -> Post | None:
    record = await get_store(info).find_one(EntityKind.POST, id)
    if record is None:
        logger.info("Post not found", post_id=str(id))
        return None
    return to_post(record)


async def resolve_posts(info: strawberry.Info) -> list[Post]:
    records = await get_store(info).find_all(EntityKind.POST)
    return [to_post(record) for record in records]


async def resolve_post_author(post: Post, info: strawberry.Info) -> User | None:
    from .user import to_user

    record = await get_store(info).find_one(EntityKind.USER, post.author_id)
    return to_user(record) if record is not None else None


async def create_post(info: strawberry.Info, dto: CreatePostInput) -> Post:
    record = await get_store(info).create(
        EntityKind.POST,
        {"title": dto.title, "content": dto.content, "author_id": dto.author_id},
    )
    return to_post(record)


async def delete_post(info: strawberry.Info, id: UUID) -> UUID:
    record = await get_store(info).delete(EntityKind.POST, id)
    return record["id"]
