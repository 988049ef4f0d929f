"""
Tests for configuration-driven database connection setup
"""

import pytest

from membergraph.config import Settings, get_async_database_url
from membergraph.database import connection


@pytest.fixture(autouse=True)
def reset_connections():
    connection.reset_database()
    yield
    connection.reset_database()


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("MEMBERGRAPH_STORE_BACKEND", "memory")
    monkeypatch.setenv("MEMBERGRAPH_GRAPHIQL", "true")

    settings = Settings()

    assert settings.store_backend == "memory"
    assert settings.graphiql is True
    assert settings.graphql_path == "/graphql"


def test_async_url_uses_asyncpg():
    assert get_async_database_url("postgresql://u:p@db:5432/app") == (
        "postgresql+asyncpg://u:p@db:5432/app"
    )


def test_async_url_keeps_explicit_driver():
    url = "postgresql+asyncpg://u:p@db/app"
    assert get_async_database_url(url) == url


def test_database_url_prefers_environment(monkeypatch):
    monkeypatch.setenv("MEMBERGRAPH_DATABASE_URL", "postgresql://env@db/app")

    assert connection.get_database_url() == "postgresql://env@db/app"


def test_init_database_builds_async_engine():
    connection.init_database("postgresql://u:p@localhost:5432/app", force_reinit=True)

    assert connection._initialized is True
    assert connection._async_engine.url.drivername == "postgresql+asyncpg"
    assert connection._async_engine.url.database == "app"


@pytest.mark.asyncio
async def test_dispose_database_resets_state():
    connection.init_database("postgresql://u:p@localhost:5432/app", force_reinit=True)

    await connection.dispose_database()

    assert connection._async_engine is None
    assert connection._initialized is False
