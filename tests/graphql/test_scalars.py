"""
Tests for the UUID scalar and MemberTypeId enum adapters
"""

import uuid

import pytest

from membergraph.graphql.scalars import (
    InvalidScalarValue,
    MemberTypeId,
    parse_uuid,
    serialize_uuid,
)


class TestUUIDScalar:
    @pytest.mark.parametrize(
        "value",
        [
            "0d6c3c0e-5a8f-4d4b-9e2b-6f1f5b1c9a11",
            "00000000-0000-0000-0000-000000000000",
            str(uuid.uuid4()),
        ],
    )
    def test_round_trip_is_canonical(self, value):
        assert serialize_uuid(parse_uuid(value)) == str(uuid.UUID(value))

    def test_uppercase_input_serializes_lowercase(self):
        value = "0D6C3C0E-5A8F-4D4B-9E2B-6F1F5B1C9A11"
        assert serialize_uuid(parse_uuid(value)) == value.lower()

    def test_uuid_instance_passes_through(self):
        value = uuid.uuid4()
        assert parse_uuid(value) is value
        assert serialize_uuid(value) == str(value)

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "",
            "0d6c3c0e5a8f4d4b9e2b6f1f5b1c9a11",  # no hyphens
            "{0d6c3c0e-5a8f-4d4b-9e2b-6f1f5b1c9a11}",
            "0d6c3c0e-5a8f-4d4b-9e2b-6f1f5b1c9a1",  # one digit short
            "zd6c3c0e-5a8f-4d4b-9e2b-6f1f5b1c9a11",
            str(uuid.uuid4()) + "\n",  # trailing newline
            123,
            None,
        ],
    )
    def test_invalid_values_raise(self, value):
        with pytest.raises(InvalidScalarValue):
            parse_uuid(value)

    def test_invalid_scalar_value_is_value_error(self):
        assert issubclass(InvalidScalarValue, ValueError)


class TestMemberTypeId:
    def test_closed_set(self):
        assert {member.value for member in MemberTypeId} == {"basic", "business"}

    def test_unknown_token_rejected(self):
        with pytest.raises(ValueError):
            MemberTypeId("premium")
