"""
Generic entity CRUD over the key-value store.

Provides typed create/read/delete, cursor pagination and idempotent
seeding for one collection. Model-specific CRUD classes inherit from
EntityCRUD and add their own operations.

Dependencies: pydantic, sqlalchemy, aksara.boundary.db.kv_store
System role: Foundation for all entity persistence operations
"""

import base64
import binascii
import logging
from typing import Any, Generic, Iterable, Sequence, TypeVar

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from aksara.boundary.db.collections import CollectionDefinition
from aksara.boundary.db.kv_store import KeyValueStore, kv_store
from aksara.core.clock import now_millis
from aksara.core.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InvalidCursorError,
    StoreError,
    ValidationError,
)
from aksara.models.common import MAX_PAGE_SIZE, Page, Record

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)

DEFAULT_PAGE_SIZE = 20

# Largest value the store's 64-bit sequence column can hold
MAX_SEQ = 2**63 - 1


def encode_cursor(seq: int) -> str:
    """Encode a store sequence number as an opaque url-safe cursor."""
    return base64.urlsafe_b64encode(str(seq).encode("ascii")).decode("ascii").rstrip("=")


def decode_cursor(cursor: str) -> int:
    """
    Decode a cursor produced by encode_cursor.

    Raises:
        InvalidCursorError: If the cursor is not a well-formed position
    """
    padded = cursor + "=" * (-len(cursor) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii")).decode("ascii")
        seq = int(raw)
    except (binascii.Error, ValueError) as e:
        raise InvalidCursorError(cursor) from e
    if seq < 0 or seq > MAX_SEQ or raw != str(seq):
        raise InvalidCursorError(cursor)
    return seq


class EntityCRUD(Generic[RecordT]):
    """
    Generic CRUD operations for one collection of records.

    Records are stored as JSON under "{prefix}:{id}". Listing order is
    store insertion order; cursors mark the last position handed out.

    Type Parameters:
        RecordT: Pydantic record model with an ``id`` field

    Attributes:
        collection: Collection definition (prefix, record type, seed)
        store: Key-value store the records live in
    """

    def __init__(
        self,
        collection: CollectionDefinition[RecordT],
        store: KeyValueStore = kv_store,
    ) -> None:
        """
        Initialize CRUD with target collection.

        Args:
            collection: Collection definition for this entity type
            store: Backing key-value store
        """
        self.collection = collection
        self.store = store

    def _dump(self, record: RecordT) -> dict[str, Any]:
        return record.model_dump(mode="json", by_alias=True)

    def _load(self, value: dict[str, Any]) -> RecordT:
        try:
            return self.collection.record_type.model_validate(value)
        except PydanticValidationError as e:
            raise StoreError(
                f"corrupt {self.collection.name} record",
                operation="load",
                details={"errors": e.error_count()},
            ) from e

    async def list(
        self,
        session: AsyncSession,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> Page[RecordT]:
        """
        Retrieve one page of records.

        Args:
            session: Async database session
            cursor: Cursor from a previous page (None for the start)
            limit: Maximum number of records (default DEFAULT_PAGE_SIZE,
                capped at MAX_PAGE_SIZE)

        Returns:
            Page of records and the cursor of the next page, None when exhausted

        Raises:
            InvalidCursorError: If the cursor is malformed
            ValidationError: If limit is not positive
        """
        limit = DEFAULT_PAGE_SIZE if limit is None else limit
        if limit < 1:
            raise ValidationError("limit must be a positive integer", field="limit")
        limit = min(limit, MAX_PAGE_SIZE)
        after_seq = decode_cursor(cursor) if cursor else 0

        # One extra row tells whether another page exists
        rows = await self.store.scan(
            session,
            self.collection.scan_prefix,
            after_seq=after_seq,
            limit=limit + 1,
        )
        has_more = len(rows) > limit
        rows = rows[:limit]

        items = [self._load(value) for _, value in rows]
        next_cursor = encode_cursor(rows[-1][0]) if has_more else None
        return Page[self.collection.record_type](items=items, next=next_cursor)

    async def list_all(
        self,
        session: AsyncSession,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Sequence[RecordT]:
        """
        Retrieve every record by walking pages until exhausted.

        The whole collection is held in memory.

        Args:
            session: Async database session
            page_size: Records fetched per store round trip

        Returns:
            All records in insertion order
        """
        records: list[RecordT] = []
        cursor: str | None = None
        while True:
            page = await self.list(session, cursor=cursor, limit=page_size)
            records.extend(page.items)
            if page.next is None:
                return records
            cursor = page.next

    async def get(self, session: AsyncSession, id: str) -> RecordT:
        """
        Retrieve a single record by ID.

        Raises:
            EntityNotFoundError: If no record has this ID
        """
        value = await self.store.get(session, self.collection.record_key(id))
        if value is None:
            raise EntityNotFoundError(self.collection.name, id)
        return self._load(value)

    async def exists(self, session: AsyncSession, id: str) -> bool:
        """Check if a record exists by ID."""
        return await self.store.exists(session, self.collection.record_key(id))

    async def create(self, session: AsyncSession, record: RecordT) -> RecordT:
        """
        Insert a new record keyed by its ID.

        Args:
            session: Async database session
            record: Record to persist

        Returns:
            The persisted record

        Raises:
            ConflictError: If a record with the same ID already exists
        """
        inserted = await self.store.insert_if_absent(
            session,
            self.collection.record_key(record.id),
            self._dump(record),
        )
        if not inserted:
            raise ConflictError(self.collection.name, record.id)
        return record

    async def save(self, session: AsyncSession, record: RecordT) -> RecordT:
        """
        Overwrite an existing record.

        Raises:
            EntityNotFoundError: If the record does not exist
        """
        updated = await self.store.put(
            session,
            self.collection.record_key(record.id),
            self._dump(record),
        )
        if not updated:
            raise EntityNotFoundError(self.collection.name, record.id)
        return record

    async def delete(self, session: AsyncSession, id: str) -> bool:
        """
        Delete a record by ID.

        Returns:
            True if record was deleted, False if not found
        """
        return await self.store.delete(session, self.collection.record_key(id))

    async def delete_many(self, session: AsyncSession, ids: Iterable[str]) -> int:
        """
        Delete every listed record that exists.

        Returns:
            Number of records actually removed
        """
        keys = [self.collection.record_key(id) for id in ids]
        return await self.store.delete_many(session, keys)

    async def ensure_seed(self, session: AsyncSession) -> bool:
        """
        Insert the collection's seed records once.

        A sentinel entry in the store marks the collection as seeded, so the
        check survives restarts and is shared between processes. Seed rows
        and the sentinel are written with conflict-ignore inserts; a caller
        that loses a race simply inserts nothing.

        Args:
            session: Async database session

        Returns:
            True if this call marked the collection as seeded
        """
        seed = self.collection.seed
        if not seed:
            return False
        if await self.store.exists(session, self.collection.seed_key):
            return False

        inserted = 0
        for record in seed:
            if await self.store.insert_if_absent(
                session,
                self.collection.record_key(record.id),
                self._dump(record),
            ):
                inserted += 1

        marked = await self.store.insert_if_absent(
            session,
            self.collection.seed_key,
            {"seeded": True, "count": len(seed), "seededAt": now_millis()},
        )
        logger.info(
            "Collection seeded",
            extra={
                "collection": self.collection.name,
                "inserted": inserted,
                "marked": marked,
            },
        )
        return marked
