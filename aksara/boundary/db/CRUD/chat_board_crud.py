"""
Chat board CRUD operations.

Extends EntityCRUD with the message sub-list stored inline on each board.

Dependencies: aksara.boundary.db.CRUD.entity_crud, aksara.models.chat
System role: Chat board and message persistence operations
"""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from aksara.boundary.db.collections import CHATS
from aksara.boundary.db.CRUD.entity_crud import EntityCRUD
from aksara.core.clock import now_millis
from aksara.models.chat import ChatBoard, ChatMessage


class ChatBoardCRUD(EntityCRUD[ChatBoard]):
    """
    CRUD operations for ChatBoard.

    Messages are appended with a read-modify-write of the board record.
    """

    def __init__(self) -> None:
        """Initialize ChatBoardCRUD with the chats collection."""
        super().__init__(CHATS)

    async def list_messages(self, session: AsyncSession, chat_id: str) -> list[ChatMessage]:
        """
        Retrieve the messages of a board in posting order.

        Raises:
            EntityNotFoundError: If the board does not exist
        """
        board = await self.get(session, chat_id)
        return board.messages

    async def send_message(
        self,
        session: AsyncSession,
        chat_id: str,
        user_id: str,
        text: str,
    ) -> ChatMessage:
        """
        Append a new message to a board.

        Args:
            session: Async database session
            chat_id: Board ID
            user_id: Author user ID (not checked against the users collection)
            text: Message body

        Returns:
            ChatMessage: The stored message

        Raises:
            EntityNotFoundError: If the board does not exist
        """
        board = await self.get(session, chat_id)
        message = ChatMessage(
            id=str(uuid.uuid4()),
            chat_id=chat_id,
            user_id=user_id,
            text=text,
            ts=now_millis(),
        )
        board.messages.append(message)
        await self.save(session, board)
        return message


chat_board_crud = ChatBoardCRUD()
