"""
Test suite for ThoughtService.

Tests thought creation, newest-first listing and idempotent deletion with
a mocked CRUD layer and session.

System role: Verification of thought service orchestration layer
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from aksara.application.services.thought_service import ThoughtService
from aksara.core.exceptions import StoreError
from aksara.models.thought import Thought


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def thought_service(mock_db_session: AsyncSession) -> ThoughtService:
    """Provide ThoughtService instance with mocked session."""
    return ThoughtService(db=mock_db_session, page_size=5)


@pytest.fixture
def mock_thought_crud():
    """Patch the thought CRUD singleton used by the service."""
    with patch("aksara.application.services.thought_service.thought_crud") as crud:
        crud.create = AsyncMock(side_effect=lambda db, thought: thought)
        crud.delete = AsyncMock(return_value=True)
        crud.list_all = AsyncMock(return_value=[])
        yield crud


def _thought(id: str, created_at: int) -> Thought:
    return Thought(id=id, text=f"text {id}", author="anonymous", created_at=created_at)


class TestCreateThought:
    """Test suite for ThoughtService.create_thought()."""

    @pytest.mark.asyncio
    async def test_create_should_assign_uuid_and_timestamp(
        self, thought_service, mock_thought_crud, mock_db_session
    ) -> None:
        # Act
        thought = await thought_service.create_thought(text="hello", author="anonymous")

        # Assert
        assert uuid.UUID(thought.id)
        assert thought.text == "hello"
        assert thought.created_at > 0
        mock_thought_crud.create.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_should_use_fresh_ids(self, thought_service, mock_thought_crud) -> None:
        first = await thought_service.create_thought(text="a", author="x")
        second = await thought_service.create_thought(text="b", author="x")

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_create_should_propagate_store_errors_without_commit(
        self, thought_service, mock_thought_crud, mock_db_session
    ) -> None:
        mock_thought_crud.create.side_effect = StoreError("store insert failed", operation="insert")

        with pytest.raises(StoreError):
            await thought_service.create_thought(text="hello", author="anonymous")

        mock_db_session.commit.assert_not_awaited()


class TestListThoughts:
    """Test suite for ThoughtService.list_thoughts()."""

    @pytest.mark.asyncio
    async def test_list_should_sort_newest_first(self, thought_service, mock_thought_crud) -> None:
        mock_thought_crud.list_all.return_value = [
            _thought("old", 1_000),
            _thought("new", 3_000),
            _thought("mid", 2_000),
        ]

        thoughts = await thought_service.list_thoughts()

        assert [t.id for t in thoughts] == ["new", "mid", "old"]
        mock_thought_crud.list_all.assert_awaited_once_with(thought_service.db, page_size=5)

    @pytest.mark.asyncio
    async def test_list_should_keep_insertion_order_for_ties(
        self, thought_service, mock_thought_crud
    ) -> None:
        mock_thought_crud.list_all.return_value = [
            _thought("first", 1_000),
            _thought("second", 1_000),
        ]

        thoughts = await thought_service.list_thoughts()

        assert [t.id for t in thoughts] == ["first", "second"]


class TestDeleteThought:
    """Test suite for ThoughtService.delete_thought()."""

    @pytest.mark.asyncio
    async def test_delete_should_report_crud_result(
        self, thought_service, mock_thought_crud, mock_db_session
    ) -> None:
        mock_thought_crud.delete.return_value = False

        deleted = await thought_service.delete_thought("missing")

        assert deleted is False
        mock_db_session.commit.assert_awaited_once()
