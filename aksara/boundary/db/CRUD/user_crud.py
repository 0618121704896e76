"""
User CRUD operations.

Dependencies: aksara.boundary.db.CRUD.entity_crud
System role: User persistence operations
"""

from aksara.boundary.db.collections import USERS
from aksara.boundary.db.CRUD.entity_crud import EntityCRUD
from aksara.models.user import User


class UserCRUD(EntityCRUD[User]):
    """CRUD operations for User."""

    def __init__(self) -> None:
        """Initialize UserCRUD with the users collection."""
        super().__init__(USERS)


user_crud = UserCRUD()
