"""
Key-value backing store.

Flat namespace of JSON values addressed by string keys, kept in the
``kv_entries`` table. Per-key writes are atomic; there are no cross-key
transactions beyond what the caller's session commits together.

Dependencies: sqlalchemy
System role: Sole path to persisted records for the entity layer
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

from sqlalchemy import delete, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from aksara.boundary.db.models.kv_entry_model import KVEntryModel
from aksara.core.exceptions import StoreError

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


@contextmanager
def _store_errors(operation: str, **context: Any) -> Iterator[None]:
    """Translate driver failures into StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(
            "Backing store operation failed",
            extra={"operation": operation, "error": str(e), **context},
        )
        raise StoreError(f"store {operation} failed", operation=operation) from e


class KeyValueStore:
    """
    Async key-value operations over KVEntryModel.

    Every method takes the request-scoped session as its first argument.
    Nothing is committed here; the caller owns the unit of work.
    """

    async def get(self, session: AsyncSession, key: str) -> dict[str, Any] | None:
        """
        Read the value stored under a key.

        Args:
            session: Async database session
            key: Namespaced key

        Returns:
            Stored JSON value, or None if the key is absent
        """
        with _store_errors("get", key=key):
            stmt = select(KVEntryModel.value).where(KVEntryModel.key == key)
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def exists(self, session: AsyncSession, key: str) -> bool:
        """Check whether a key is present."""
        with _store_errors("exists", key=key):
            stmt = select(KVEntryModel.seq).where(KVEntryModel.key == key)
            result = await session.execute(stmt)
            return result.scalar_one_or_none() is not None

    async def insert_if_absent(
        self,
        session: AsyncSession,
        key: str,
        value: dict[str, Any],
    ) -> bool:
        """
        Insert a value unless the key already exists.

        Uses a single ``INSERT ... ON CONFLICT DO NOTHING`` statement so
        concurrent writers racing on the same key never fail and never
        produce two rows.

        Args:
            session: Async database session
            key: Namespaced key
            value: JSON-serializable value

        Returns:
            True if this call inserted the entry, False if the key was taken
        """
        dialect = session.bind.dialect.name
        insert = _DIALECT_INSERTS.get(dialect)
        if insert is None:
            raise StoreError(
                f"unsupported store dialect: {dialect}",
                operation="insert",
            )

        with _store_errors("insert", key=key):
            stmt = (
                insert(KVEntryModel)
                .values(key=key, value=value)
                .on_conflict_do_nothing(index_elements=["key"])
                .returning(KVEntryModel.seq)
            )
            result = await session.execute(stmt)
            return result.scalar_one_or_none() is not None

    async def put(self, session: AsyncSession, key: str, value: dict[str, Any]) -> bool:
        """
        Replace the value of an existing key.

        Returns:
            True if the key existed and was overwritten, False otherwise
        """
        with _store_errors("put", key=key):
            stmt = (
                update(KVEntryModel)
                .where(KVEntryModel.key == key)
                .values(value=value)
            )
            result = await session.execute(stmt)
            return result.rowcount > 0

    async def delete(self, session: AsyncSession, key: str) -> bool:
        """
        Remove a key.

        Returns:
            True if an entry was removed, False if the key was absent
        """
        with _store_errors("delete", key=key):
            stmt = delete(KVEntryModel).where(KVEntryModel.key == key)
            result = await session.execute(stmt)
            return result.rowcount > 0

    async def delete_many(self, session: AsyncSession, keys: Iterable[str]) -> int:
        """
        Remove every listed key that exists.

        Returns:
            Number of entries actually removed
        """
        unique_keys = list(dict.fromkeys(keys))
        if not unique_keys:
            return 0

        with _store_errors("delete_many", key_count=len(unique_keys)):
            stmt = delete(KVEntryModel).where(KVEntryModel.key.in_(unique_keys))
            result = await session.execute(stmt)
            return result.rowcount

    async def scan(
        self,
        session: AsyncSession,
        prefix: str,
        after_seq: int = 0,
        limit: int | None = None,
    ) -> list[tuple[int, dict[str, Any]]]:
        """
        Enumerate entries under a key prefix in insertion order.

        Args:
            session: Async database session
            prefix: Key prefix, matched literally
            after_seq: Only entries inserted after this sequence number
            limit: Maximum number of entries (None for all)

        Returns:
            List of (seq, value) pairs ordered by seq
        """
        with _store_errors("scan", prefix=prefix, after_seq=after_seq):
            stmt = (
                select(KVEntryModel.seq, KVEntryModel.value)
                .where(
                    KVEntryModel.key.startswith(prefix, autoescape=True),
                    KVEntryModel.seq > after_seq,
                )
                .order_by(KVEntryModel.seq)
            )
            if limit is not None:
                stmt = stmt.limit(limit)
            result = await session.execute(stmt)
            return [(row.seq, row.value) for row in result]


kv_store = KeyValueStore()
