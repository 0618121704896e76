"""
Thought API endpoints.

Routes:
- GET /thoughts - List all thoughts, newest first
- POST /thoughts - Post a thought
- DELETE /thoughts/{thought_id} - Delete a thought

Dependencies: aksara.application.services, aksara.models
System role: Thought board HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from aksara.api.deps.dependencies import get_thought_service
from aksara.application.services.thought_service import ThoughtService
from aksara.models.common import DeleteResult, SuccessResponse
from aksara.models.thought import CreateThoughtRequest, Thought

from .router_utils.error_handling import handle_api_errors
from .router_utils.responses import ok
from .router_utils.validators import resolve_author, validate_id, validate_thought_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/thoughts", tags=["thoughts"])


@router.get("", response_model=SuccessResponse[list[Thought]])
@handle_api_errors
async def list_thoughts(
    thought_service: ThoughtService = Depends(get_thought_service),
) -> SuccessResponse[list[Thought]]:
    """
    List every thought sorted by createdAt descending.

    Args:
        thought_service: Injected ThoughtService

    Returns:
        SuccessResponse[list[Thought]]: All thoughts, newest first
    """
    thoughts = await thought_service.list_thoughts()

    logger.info("Thoughts retrieved", extra={"count": len(thoughts)})

    return ok(thoughts)


@router.post("", response_model=SuccessResponse[Thought])
@handle_api_errors
async def create_thought(
    request: CreateThoughtRequest,
    thought_service: ThoughtService = Depends(get_thought_service),
) -> SuccessResponse[Thought]:
    """
    Post a new thought.

    Args:
        request: CreateThoughtRequest with text and optional author
        thought_service: Injected ThoughtService

    Returns:
        SuccessResponse[Thought]: Created thought

    Raises:
        400: Text empty, whitespace-only, or over 500 characters
    """
    text = validate_thought_text(request.text)
    author = resolve_author(request.author)

    thought = await thought_service.create_thought(text=text, author=author)
    return ok(thought)


@router.delete("/{thought_id}", response_model=SuccessResponse[DeleteResult])
@handle_api_errors
async def delete_thought(
    thought_id: str,
    thought_service: ThoughtService = Depends(get_thought_service),
) -> SuccessResponse[DeleteResult]:
    """
    Delete a thought. Deleting an unknown ID reports ``deleted: false``.

    Args:
        thought_id: Thought ID
        thought_service: Injected ThoughtService

    Returns:
        SuccessResponse[DeleteResult]: ``{id, deleted}``
    """
    thought_id = validate_id(thought_id)
    deleted = await thought_service.delete_thought(thought_id)
    return ok(DeleteResult(id=thought_id, deleted=deleted))
