"""
MemberType GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ..scalars import MemberTypeId

if TYPE_CHECKING:
    from .profile import Profile


@strawberry.type
class MemberType:
    """Membership tier type for GraphQL API."""

    id: MemberTypeId
    discount: float
    posts_limit_per_month: int

    @strawberry.field
    async def profiles(
        self, info: strawberry.Info
    ) -> list[Annotated["Profile", strawberry.lazy(".profile")]]:
        """Get profiles on this membership tier."""
        from ..resolvers.member_type import resolve_member_type_profiles

        return await resolve_member_type_profiles(self, info)
