"""
Thought CRUD operations.

Dependencies: aksara.boundary.db.CRUD.entity_crud
System role: Thought persistence operations
"""

from aksara.boundary.db.collections import THOUGHTS
from aksara.boundary.db.CRUD.entity_crud import EntityCRUD
from aksara.models.thought import Thought


class ThoughtCRUD(EntityCRUD[Thought]):
    """CRUD operations for Thought."""

    def __init__(self) -> None:
        """Initialize ThoughtCRUD with the thoughts collection."""
        super().__init__(THOUGHTS)


thought_crud = ThoughtCRUD()
