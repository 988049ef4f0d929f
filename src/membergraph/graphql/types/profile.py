"""
Profile GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated
from uuid import UUID

import strawberry

from ..scalars import MemberTypeId

if TYPE_CHECKING:
    from .member_type import MemberType
    from .user import User


@strawberry.type
class Profile:
    """Profile type for GraphQL API."""

    id: UUID
    is_member: bool
    years_of_experience: int
    user_id: UUID
    member_type_id: MemberTypeId

    @strawberry.field
    async def user(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the user this profile belongs to."""
        from ..resolvers.profile import resolve_profile_user

        return await resolve_profile_user(self, info)

    @strawberry.field
    async def member_type(
        self, info: strawberry.Info
    ) -> Annotated["MemberType", strawberry.lazy(".member_type")] | None:
        """Get the member type referenced by this profile."""
        from ..resolvers.profile import resolve_profile_member_type

        return await resolve_profile_member_type(self, info)
