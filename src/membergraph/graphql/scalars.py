"""
Custom scalar and enum adapters shared by the GraphQL types
"""

import re
from enum import Enum
from typing import Any
from uuid import UUID

import strawberry

_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


class InvalidScalarValue(ValueError):
    """Raised when a value cannot be coerced into a custom scalar."""


def parse_uuid(value: Any) -> UUID:
    """Parse the hyphenated textual form of a UUID.

    Raises:
        InvalidScalarValue: If the value is not a UUID string
    """
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str) or not _UUID_RE.fullmatch(value):
        raise InvalidScalarValue(f"Value is not a valid UUID: {value!r}")
    return UUID(value)


def serialize_uuid(value: UUID | str) -> str:
    """Serialize to the canonical lowercase hyphenated form."""
    return str(parse_uuid(value))


UUIDScalar = strawberry.scalar(
    name="UUID",
    description="Universally unique identifier in its hyphenated textual form",
    serialize=serialize_uuid,
    parse_value=parse_uuid,
)


@strawberry.enum
class MemberTypeId(Enum):
    """Identifiers of the fixed membership tiers."""

    # GraphQL tokens are the lowercase identifiers stored in the database
    basic = "basic"
    business = "business"
