"""
Database models package.

Exports:
  - KVEntryModel: Row of the flat key-value namespace

Dependencies: sqlalchemy, aksara.boundary.db.base
System role: Database model definitions for the backing store
"""

from aksara.boundary.db.models.kv_entry_model import KVEntryModel

__all__ = ["KVEntryModel"]
