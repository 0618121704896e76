"""
Chat board domain models and schemas.

Dependencies: pydantic
System role: Chat board and message records, API contracts
"""

from pydantic import BaseModel, Field

from aksara.models.common import Record


class ChatMessage(Record):
    """A message posted to a chat board."""

    chat_id: str = Field(..., alias="chatId")
    user_id: str = Field(..., alias="userId")
    text: str
    ts: int = Field(..., description="Epoch milliseconds")


class ChatBoard(Record):
    """A chat board holding its messages inline."""

    title: str
    messages: list[ChatMessage] = Field(default_factory=list)


class ChatSummary(BaseModel):
    """Response schema for a freshly created chat board."""

    id: str
    title: str


class CreateChatRequest(BaseModel):
    """Request schema for creating a chat board."""

    title: str | None = None


class SendMessageRequest(BaseModel):
    """Request schema for posting a message to a chat board."""

    user_id: str | None = Field(default=None, alias="userId")
    text: str | None = None
