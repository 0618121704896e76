"""
Thought service orchestrator.

Coordinates posting, listing and deleting thoughts.

Dependencies: aksara.boundary.db.CRUD
System role: Thought use case orchestration
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from aksara.boundary.db.CRUD.thought_crud import thought_crud
from aksara.core.clock import now_millis
from aksara.models.thought import Thought

logger = logging.getLogger(__name__)


class ThoughtService:
    """Thought service orchestrator."""

    def __init__(self, db: AsyncSession, page_size: int = 20) -> None:
        """
        Initialize thought service with async database session.

        Args:
            db: Async SQLAlchemy session
            page_size: Records fetched per store round trip when listing
        """
        self.db = db
        self.page_size = page_size

    async def list_thoughts(self) -> list[Thought]:
        """
        Get every thought, newest first.

        The whole collection is loaded and sorted in memory. Thoughts sharing
        a createdAt keep their insertion order.

        Returns:
            list[Thought]: Thoughts sorted by createdAt descending
        """
        thoughts = await thought_crud.list_all(self.db, page_size=self.page_size)
        return sorted(thoughts, key=lambda t: t.created_at, reverse=True)

    async def create_thought(self, text: str, author: str) -> Thought:
        """
        Persist a new thought with a fresh ID and timestamp.

        Args:
            text: Validated, trimmed thought text
            author: Resolved author name

        Returns:
            Thought: The stored thought
        """
        thought = Thought(
            id=str(uuid.uuid4()),
            text=text,
            author=author,
            created_at=now_millis(),
        )
        try:
            created = await thought_crud.create(self.db, thought)
            await self.db.commit()
        except Exception as e:
            logger.error(
                "Failed to create thought",
                extra={"error": str(e), "thought_id": thought.id},
            )
            raise

        logger.info(
            "Thought created",
            extra={"thought_id": created.id, "text_length": len(created.text)},
        )
        return created

    async def delete_thought(self, thought_id: str) -> bool:
        """
        Delete a thought.

        Args:
            thought_id: Thought ID

        Returns:
            bool: True if a thought was removed, False if it did not exist
        """
        deleted = await thought_crud.delete(self.db, thought_id)
        await self.db.commit()
        logger.info(
            "Thought delete processed",
            extra={"thought_id": thought_id, "deleted": deleted},
        )
        return deleted
