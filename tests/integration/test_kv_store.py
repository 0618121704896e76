"""
Test suite for KeyValueStore against in-memory SQLite.

Tests conflict-ignore inserts, replace, delete, bulk delete and ordered
prefix scans.

System role: Verification of the backing store contract
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from aksara.boundary.db.kv_store import KeyValueStore
from aksara.core.exceptions import StoreError


@pytest.fixture
def store() -> KeyValueStore:
    """Provide KeyValueStore instance for testing."""
    return KeyValueStore()


class TestInsertIfAbsent:
    """Test suite for KeyValueStore.insert_if_absent()."""

    @pytest.mark.asyncio
    async def test_insert_should_store_value(self, store, test_async_db) -> None:
        inserted = await store.insert_if_absent(test_async_db, "user:1", {"id": "1"})

        assert inserted is True
        assert await store.get(test_async_db, "user:1") == {"id": "1"}

    @pytest.mark.asyncio
    async def test_insert_existing_key_should_keep_first_value(self, store, test_async_db) -> None:
        await store.insert_if_absent(test_async_db, "user:1", {"id": "1", "name": "first"})

        inserted = await store.insert_if_absent(test_async_db, "user:1", {"id": "1", "name": "second"})

        assert inserted is False
        assert await store.get(test_async_db, "user:1") == {"id": "1", "name": "first"}

    @pytest.mark.asyncio
    async def test_insert_should_reject_unknown_dialect(self, store) -> None:
        session = AsyncMock(spec=AsyncSession)
        session.bind = MagicMock()
        session.bind.dialect.name = "mysql"

        with pytest.raises(StoreError):
            await store.insert_if_absent(session, "user:1", {"id": "1"})


class TestGetAndExists:
    """Test suite for reads."""

    @pytest.mark.asyncio
    async def test_get_missing_key_should_return_none(self, store, test_async_db) -> None:
        assert await store.get(test_async_db, "user:missing") is None

    @pytest.mark.asyncio
    async def test_exists_should_reflect_presence(self, store, test_async_db) -> None:
        await store.insert_if_absent(test_async_db, "user:1", {"id": "1"})

        assert await store.exists(test_async_db, "user:1") is True
        assert await store.exists(test_async_db, "user:2") is False


class TestPut:
    """Test suite for KeyValueStore.put()."""

    @pytest.mark.asyncio
    async def test_put_should_replace_existing_value(self, store, test_async_db) -> None:
        await store.insert_if_absent(test_async_db, "chat:1", {"id": "1", "messages": []})

        updated = await store.put(test_async_db, "chat:1", {"id": "1", "messages": ["hi"]})

        assert updated is True
        assert await store.get(test_async_db, "chat:1") == {"id": "1", "messages": ["hi"]}

    @pytest.mark.asyncio
    async def test_put_missing_key_should_not_create(self, store, test_async_db) -> None:
        updated = await store.put(test_async_db, "chat:1", {"id": "1"})

        assert updated is False
        assert await store.exists(test_async_db, "chat:1") is False


class TestDelete:
    """Test suite for single and bulk delete."""

    @pytest.mark.asyncio
    async def test_delete_should_report_whether_removed(self, store, test_async_db) -> None:
        await store.insert_if_absent(test_async_db, "user:1", {"id": "1"})

        assert await store.delete(test_async_db, "user:1") is True
        assert await store.delete(test_async_db, "user:1") is False

    @pytest.mark.asyncio
    async def test_delete_many_should_count_only_present_keys(self, store, test_async_db) -> None:
        await store.insert_if_absent(test_async_db, "user:1", {"id": "1"})
        await store.insert_if_absent(test_async_db, "user:2", {"id": "2"})

        count = await store.delete_many(
            test_async_db, ["user:1", "user:2", "user:3", "user:1"]
        )

        assert count == 2

    @pytest.mark.asyncio
    async def test_delete_many_with_no_keys_should_return_zero(self, store, test_async_db) -> None:
        assert await store.delete_many(test_async_db, []) == 0


class TestScan:
    """Test suite for KeyValueStore.scan()."""

    @pytest.mark.asyncio
    async def test_scan_should_follow_insertion_order_within_prefix(self, store, test_async_db) -> None:
        await store.insert_if_absent(test_async_db, "user:b", {"id": "b"})
        await store.insert_if_absent(test_async_db, "chat:x", {"id": "x"})
        await store.insert_if_absent(test_async_db, "user:a", {"id": "a"})

        rows = await store.scan(test_async_db, "user:")

        assert [value["id"] for _, value in rows] == ["b", "a"]

    @pytest.mark.asyncio
    async def test_scan_should_resume_after_sequence(self, store, test_async_db) -> None:
        for name in ("a", "b", "c"):
            await store.insert_if_absent(test_async_db, f"user:{name}", {"id": name})

        first = await store.scan(test_async_db, "user:", limit=1)
        rest = await store.scan(test_async_db, "user:", after_seq=first[-1][0])

        assert [value["id"] for _, value in first] == ["a"]
        assert [value["id"] for _, value in rest] == ["b", "c"]

    @pytest.mark.asyncio
    async def test_scan_should_treat_prefix_literally(self, store, test_async_db) -> None:
        await store.insert_if_absent(test_async_db, "user:1", {"id": "1"})

        assert await store.scan(test_async_db, "us%:") == []


class TestStoreErrors:
    """Driver failures surface as StoreError."""

    @pytest.mark.asyncio
    async def test_driver_error_should_raise_store_error(self, store) -> None:
        session = AsyncMock(spec=AsyncSession)
        session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("db down")))

        with pytest.raises(StoreError) as exc_info:
            await store.get(session, "user:1")

        assert exc_info.value.details["operation"] == "get"
