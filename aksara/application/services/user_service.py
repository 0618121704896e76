"""
User service orchestrator.

Dependencies: aksara.boundary.db.CRUD
System role: User use case orchestration
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from aksara.boundary.db.CRUD.user_crud import user_crud
from aksara.models.common import Page
from aksara.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """User service orchestrator."""

    def __init__(self, db: AsyncSession, page_size: int = 20) -> None:
        """
        Initialize user service with async database session.

        Args:
            db: Async SQLAlchemy session
            page_size: Page size used when the caller passes no limit
        """
        self.db = db
        self.page_size = page_size

    async def list_users(self, cursor: str | None = None, limit: int | None = None) -> Page[User]:
        """
        Get one page of users, seeding the demo users on first use.

        Args:
            cursor: Cursor from a previous page
            limit: Page size (service default when None)

        Returns:
            Page[User]: Users and the next cursor
        """
        await user_crud.ensure_seed(self.db)
        await self.db.commit()
        return await user_crud.list(self.db, cursor=cursor, limit=limit or self.page_size)

    async def create_user(self, name: str) -> User:
        """Persist a new user with a fresh ID."""
        user = await user_crud.create(self.db, User(id=str(uuid.uuid4()), name=name))
        await self.db.commit()
        logger.info("User created", extra={"user_id": user.id})
        return user

    async def delete_user(self, user_id: str) -> bool:
        """Delete a user; False when it did not exist."""
        deleted = await user_crud.delete(self.db, user_id)
        await self.db.commit()
        return deleted

    async def delete_users(self, user_ids: list[str]) -> int:
        """
        Delete several users.

        Returns:
            int: Number of users actually removed
        """
        count = await user_crud.delete_many(self.db, user_ids)
        await self.db.commit()
        logger.info(
            "Users deleted",
            extra={"requested": len(user_ids), "deleted_count": count},
        )
        return count
