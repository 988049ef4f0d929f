"""
Tests for the SQLAlchemy store with a mocked async session
"""

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from membergraph.dbmodels import MemberTypes, Posts, Users
from membergraph.store import EntityKind, RecordNotFoundError, SqlAlchemyStore
from membergraph.store.sql import to_record


@pytest.fixture
def session():
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def patched_session(session):
    with patch("membergraph.store.sql.get_async_session") as mock_get_session:
        mock_get_session.return_value.__aenter__.return_value = session
        yield session


@pytest.fixture
def user_row():
    return Users(id=uuid.uuid4(), name="Test User", balance=5.0)


def test_to_record_copies_columns(user_row):
    assert to_record(user_row) == {"id": user_row.id, "name": "Test User", "balance": 5.0}


def test_to_record_member_type():
    row = MemberTypes(id="basic", discount=2.3, posts_limit_per_month=20)

    assert to_record(row) == {"id": "basic", "discount": 2.3, "posts_limit_per_month": 20}


class TestSqlAlchemyStore:
    @pytest.mark.asyncio
    async def test_find_one(self, patched_session, user_row):
        patched_session.get.return_value = user_row

        record = await SqlAlchemyStore().find_one(EntityKind.USER, user_row.id)

        patched_session.get.assert_awaited_once_with(Users, user_row.id)
        assert record["name"] == "Test User"

    @pytest.mark.asyncio
    async def test_find_one_missing(self, patched_session):
        patched_session.get.return_value = None

        assert await SqlAlchemyStore().find_one(EntityKind.POST, uuid.uuid4()) is None
        patched_session.get.assert_awaited_once()
        assert patched_session.get.await_args.args[0] is Posts

    @pytest.mark.asyncio
    async def test_find_all(self, patched_session, user_row):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = [user_row]
        patched_session.execute.return_value = mock_result

        records = await SqlAlchemyStore().find_all(EntityKind.USER)

        assert records == [to_record(user_row)]

    @pytest.mark.asyncio
    async def test_find_many(self, patched_session):
        author_id = uuid.uuid4()
        post = Posts(id=uuid.uuid4(), title="t", content="c", author_id=author_id)
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = [post]
        patched_session.execute.return_value = mock_result

        records = await SqlAlchemyStore().find_many(EntityKind.POST, "author_id", author_id)

        assert records[0]["author_id"] == author_id
        statement = patched_session.execute.await_args.args[0]
        assert "posts.author_id" in str(statement)

    @pytest.mark.asyncio
    async def test_create(self, patched_session):
        new_id = uuid.uuid4()

        async def fake_refresh(row):
            row.id = new_id

        patched_session.refresh.side_effect = fake_refresh

        record = await SqlAlchemyStore().create(EntityKind.USER, {"name": "A", "balance": 1.0})

        added = patched_session.add.call_args.args[0]
        assert isinstance(added, Users)
        patched_session.flush.assert_awaited_once()
        assert record == {"id": new_id, "name": "A", "balance": 1.0}

    @pytest.mark.asyncio
    async def test_delete(self, patched_session, user_row):
        patched_session.get.return_value = user_row

        record = await SqlAlchemyStore().delete(EntityKind.USER, user_row.id)

        patched_session.delete.assert_awaited_once_with(user_row)
        assert record["id"] == user_row.id

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, patched_session):
        patched_session.get.return_value = None

        with pytest.raises(RecordNotFoundError):
            await SqlAlchemyStore().delete(EntityKind.USER, uuid.uuid4())

        patched_session.delete.assert_not_awaited()
