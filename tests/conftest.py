"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from membergraph.graphql.context import build_context
from membergraph.graphql.schema import schema
from membergraph.store import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh in-memory store seeded with the member types."""
    return InMemoryStore()


@pytest.fixture
def mock_info(store: InMemoryStore) -> MagicMock:
    """Create a mock GraphQL info object carrying the in-memory store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = build_context(store)
    return info


@pytest.fixture
def execute(store: InMemoryStore) -> Callable[..., Any]:
    """Execute a GraphQL document against the shared schema and the test store."""

    async def _execute(query: str, variables: dict[str, Any] | None = None) -> Any:
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=build_context(store),
        )

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
