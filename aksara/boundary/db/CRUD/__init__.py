"""
CRUD operations for stored entities.

Exports the generic entity CRUD class and collection-specific
implementations with pre-instantiated singletons for direct use.

Usage:
    from aksara.boundary.db.CRUD import thought_crud, user_crud, chat_board_crud

    # Use singleton instances
    page = await user_crud.list(db, cursor=None, limit=10)

    # Or instantiate classes directly for custom behavior
    from aksara.boundary.db.CRUD import EntityCRUD
    from aksara.boundary.db.collections import USERS
    custom_crud = EntityCRUD(USERS)
"""

from aksara.boundary.db.CRUD.entity_crud import EntityCRUD
from aksara.boundary.db.CRUD.thought_crud import ThoughtCRUD, thought_crud
from aksara.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from aksara.boundary.db.CRUD.chat_board_crud import ChatBoardCRUD, chat_board_crud

__all__ = [
    "EntityCRUD",
    "ThoughtCRUD",
    "thought_crud",
    "UserCRUD",
    "user_crud",
    "ChatBoardCRUD",
    "chat_board_crud",
]
