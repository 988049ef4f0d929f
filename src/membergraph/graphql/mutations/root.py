"""
Root GraphQL mutation definitions
"""

from uuid import UUID

import strawberry

from ..scalars import MemberTypeId
from ..types.post import Post
from ..types.profile import Profile
from ..types.user import User


# Input types for mutations
@strawberry.input
class CreateUserInput:
    """Input for creating a new user."""

    name: str
    balance: float


@strawberry.input
class CreatePostInput:
    """Input for creating a new post."""

    title: str
    content: str
    author_id: UUID


@strawberry.input
class CreateProfileInput:
    """Input for creating a new profile."""

    is_member: bool
    years_of_experience: int
    user_id: UUID
    member_type_id: MemberTypeId


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, dto: CreateUserInput) -> User | None:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, dto)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: UUID) -> UUID | None:
        """Delete a user and return its ID."""
        from ..resolvers.user import delete_user

        return await delete_user(info, id)

    # Post mutations
    @strawberry.mutation(name="createPost")
    async def create_post(self, info: strawberry.Info, dto: CreatePostInput) -> Post | None:
        """Create a new post."""
        from ..resolvers.post import create_post

        return await create_post(info, dto)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: strawberry.Info, id: UUID) -> UUID | None:
        """Delete a post and return its ID."""
        from ..resolvers.post import delete_post

        return await delete_post(info, id)

    # Profile mutations
    @strawberry.mutation(name="createProfile")
    async def create_profile(
        self, info: strawberry.Info, dto: CreateProfileInput
    ) -> Profile | None:
        """Create a new profile."""
        from ..resolvers.profile import create_profile

        return await create_profile(info, dto)

    @strawberry.mutation(name="deleteProfile")
    async def delete_profile(self, info: strawberry.Info, id: UUID) -> UUID | None:
        """Delete a profile and return its ID."""
        from ..resolvers.profile import delete_profile

        return await delete_profile(info, id)
