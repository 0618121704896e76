"""
Chat board API endpoints (demo collection).

Routes:
- GET /chats - Page through chat boards (seeds demo board on first call)
- POST /chats - Create chat board
- GET /chats/{chat_id}/messages - List messages of a board
- POST /chats/{chat_id}/messages - Post a message to a board
- DELETE /chats/{chat_id} - Delete chat board
- POST /chats/deleteMany - Delete several chat boards

Dependencies: aksara.application.services, aksara.models
System role: Chat board HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from aksara.api.deps.dependencies import get_chat_service
from aksara.application.services.chat_service import ChatService
from aksara.models.chat import (
    ChatBoard,
    ChatMessage,
    ChatSummary,
    CreateChatRequest,
    SendMessageRequest,
)
from aksara.models.common import (
    DeleteManyRequest,
    DeleteManyResult,
    DeleteResult,
    Page,
    SuccessResponse,
)

from .router_utils.error_handling import handle_api_errors
from .router_utils.responses import ok
from .router_utils.validators import (
    filter_ids,
    parse_limit,
    require_text,
    validate_message_fields,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chats", tags=["chats"])


@router.get("", response_model=SuccessResponse[Page[ChatBoard]])
@handle_api_errors
async def list_chats(
    cursor: str | None = None,
    limit: str | None = None,
    chat_service: ChatService = Depends(get_chat_service),
) -> SuccessResponse[Page[ChatBoard]]:
    """
    List chat boards one page at a time.

    Args:
        cursor: Cursor returned as ``next`` by the previous page
        limit: Page size; truncated and clamped to at least 1
        chat_service: Injected ChatService

    Returns:
        SuccessResponse[Page[ChatBoard]]: Boards and next cursor

    Raises:
        400: Malformed cursor
    """
    page = await chat_service.list_chats(cursor=cursor, limit=parse_limit(limit))
    return ok(page)


@router.post("", response_model=SuccessResponse[ChatSummary])
@handle_api_errors
async def create_chat(
    request: CreateChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> SuccessResponse[ChatSummary]:
    """Create an empty chat board; responds with its id and title only."""
    title = require_text(request.title, "title")
    board = await chat_service.create_chat(title)
    return ok(ChatSummary(id=board.id, title=board.title))


@router.get("/{chat_id}/messages", response_model=SuccessResponse[list[ChatMessage]])
@handle_api_errors
async def list_messages(
    chat_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> SuccessResponse[list[ChatMessage]]:
    """
    List the messages of a chat board.

    Raises:
        404: Chat board does not exist
    """
    messages = await chat_service.list_messages(chat_id)
    return ok(messages)


@router.post("/{chat_id}/messages", response_model=SuccessResponse[ChatMessage])
@handle_api_errors
async def send_message(
    chat_id: str,
    request: SendMessageRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> SuccessResponse[ChatMessage]:
    """
    Post a message to a chat board.

    Args:
        chat_id: Chat board ID
        request: SendMessageRequest with userId and text
        chat_service: Injected ChatService

    Returns:
        SuccessResponse[ChatMessage]: Stored message

    Raises:
        400: userId or text missing
        404: Chat board does not exist
    """
    user_id, text = validate_message_fields(request.user_id, request.text)

    logger.info(
        "Posting chat message",
        extra={"chat_id": chat_id, "user_id": user_id},
    )

    message = await chat_service.send_message(chat_id, user_id, text)
    return ok(message)


@router.delete("/{chat_id}", response_model=SuccessResponse[DeleteResult])
@handle_api_errors
async def delete_chat(
    chat_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> SuccessResponse[DeleteResult]:
    """Delete a chat board; unknown IDs report ``deleted: false``."""
    deleted = await chat_service.delete_chat(chat_id)
    return ok(DeleteResult(id=chat_id, deleted=deleted))


@router.post("/deleteMany", response_model=SuccessResponse[DeleteManyResult])
@handle_api_errors
async def delete_chats(
    request: DeleteManyRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> SuccessResponse[DeleteManyResult]:
    """Delete several chat boards; non-string ids are ignored."""
    ids = filter_ids(request.ids)
    count = await chat_service.delete_chats(ids)
    return ok(DeleteManyResult(deleted_count=count, ids=ids))
