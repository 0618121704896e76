"""
Key-value entry ORM model.

Every record of every collection lives in one flat table, addressed by
a string key of the form ``"{prefix}:{id}"``.

Dependencies: sqlalchemy, aksara.boundary.db.base
System role: Physical storage of serialized records
"""

from typing import Any

from sqlalchemy import JSON, BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from aksara.boundary.db.base import Base, TimestampMixin


class KVEntryModel(Base, TimestampMixin):
    """
    Key-value entry ORM model.

    Attributes:
        seq: Monotonic insertion sequence, used as the pagination position
        key: Unique namespaced key
        value: JSON-serialized record
        created_at: Entry creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "kv_entries"
    # Keeps SQLite from reusing the sequence of a deleted tail row
    __table_args__ = {"sqlite_autoincrement": True}

    seq: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    key: Mapped[str] = mapped_column(
        String(512),
        unique=True,
        index=True,
        nullable=False,
        doc="Namespaced record key",
    )

    value: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        doc="Serialized record",
    )
