"""
Chat service orchestrator.

Coordinates chat boards and their messages.

Dependencies: aksara.boundary.db.CRUD
System role: Chat board use case orchestration
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from aksara.boundary.db.CRUD.chat_board_crud import chat_board_crud
from aksara.core.exceptions import EntityNotFoundError
from aksara.models.chat import ChatBoard, ChatMessage
from aksara.models.common import Page

logger = logging.getLogger(__name__)


class ChatService:
    """Chat service orchestrator."""

    def __init__(self, db: AsyncSession, page_size: int = 20) -> None:
        """
        Initialize chat service with async database session.

        Args:
            db: Async SQLAlchemy session
            page_size: Page size used when the caller passes no limit
        """
        self.db = db
        self.page_size = page_size

    async def list_chats(self, cursor: str | None = None, limit: int | None = None) -> Page[ChatBoard]:
        """
        Get one page of chat boards, seeding the demo board on first use.

        Args:
            cursor: Cursor from a previous page
            limit: Page size (service default when None)

        Returns:
            Page[ChatBoard]: Boards and the next cursor
        """
        await chat_board_crud.ensure_seed(self.db)
        await self.db.commit()
        return await chat_board_crud.list(self.db, cursor=cursor, limit=limit or self.page_size)

    async def create_chat(self, title: str) -> ChatBoard:
        """Persist a new, empty chat board."""
        board = await chat_board_crud.create(
            self.db,
            ChatBoard(id=str(uuid.uuid4()), title=title, messages=[]),
        )
        await self.db.commit()
        logger.info("Chat board created", extra={"chat_id": board.id})
        return board

    async def _require_chat(self, chat_id: str) -> None:
        if not await chat_board_crud.exists(self.db, chat_id):
            raise EntityNotFoundError("chat", chat_id, message="chat not found")

    async def list_messages(self, chat_id: str) -> list[ChatMessage]:
        """
        Get the messages of a board.

        Raises:
            EntityNotFoundError: If the board does not exist
        """
        await self._require_chat(chat_id)
        return await chat_board_crud.list_messages(self.db, chat_id)

    async def send_message(self, chat_id: str, user_id: str, text: str) -> ChatMessage:
        """
        Post a message to an existing board.

        The board is checked before anything is written.

        Raises:
            EntityNotFoundError: If the board does not exist
        """
        await self._require_chat(chat_id)
        try:
            message = await chat_board_crud.send_message(self.db, chat_id, user_id, text)
            await self.db.commit()
        except Exception as e:
            logger.error(
                "Failed to send message",
                extra={"error": str(e), "chat_id": chat_id},
            )
            raise

        logger.info(
            "Message sent",
            extra={"chat_id": chat_id, "message_id": message.id},
        )
        return message

    async def delete_chat(self, chat_id: str) -> bool:
        """Delete a board and its messages; False when it did not exist."""
        deleted = await chat_board_crud.delete(self.db, chat_id)
        await self.db.commit()
        return deleted

    async def delete_chats(self, chat_ids: list[str]) -> int:
        """
        Delete several boards.

        Returns:
            int: Number of boards actually removed
        """
        count = await chat_board_crud.delete_many(self.db, chat_ids)
        await self.db.commit()
        logger.info(
            "Chat boards deleted",
            extra={"requested": len(chat_ids), "deleted_count": count},
        )
        return count
