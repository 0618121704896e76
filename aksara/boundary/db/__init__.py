"""
Database boundary layer: key-value store, entity CRUD, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - KVEntryModel: Row of the flat key-value namespace
  - KeyValueStore, kv_store: Backing store contract
  - get_async_engine(), get_async_session_factory(), get_async_db(), create_tables()
  - thought_crud, user_crud, chat_board_crud: CRUD operation singletons

Dependencies: sqlalchemy, aksara.configs
System role: Database adapter providing persistent storage for every collection.
"""

from aksara.boundary.db.base import Base, TimestampMixin
from aksara.boundary.db.connection import (
    create_tables,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from aksara.boundary.db.models.kv_entry_model import KVEntryModel
from aksara.boundary.db.kv_store import KeyValueStore, kv_store
from aksara.boundary.db.CRUD import (
    EntityCRUD,
    ThoughtCRUD,
    UserCRUD,
    ChatBoardCRUD,
    thought_crud,
    user_crud,
    chat_board_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "KVEntryModel",
    # Connection
    "create_tables",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Store
    "KeyValueStore",
    "kv_store",
    # CRUD classes
    "EntityCRUD",
    "ThoughtCRUD",
    "UserCRUD",
    "ChatBoardCRUD",
    # CRUD singletons
    "thought_crud",
    "user_crud",
    "chat_board_crud",
]
