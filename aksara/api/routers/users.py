"""
User API endpoints (demo collection).

Routes:
- GET /users - Page through users (seeds demo users on first call)
- POST /users - Create user
- DELETE /users/{user_id} - Delete user
- POST /users/deleteMany - Delete several users

Dependencies: aksara.application.services, aksara.models
System role: User management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from aksara.api.deps.dependencies import get_user_service
from aksara.application.services.user_service import UserService
from aksara.models.common import (
    DeleteManyRequest,
    DeleteManyResult,
    DeleteResult,
    Page,
    SuccessResponse,
)
from aksara.models.user import CreateUserRequest, User

from .router_utils.error_handling import handle_api_errors
from .router_utils.responses import ok
from .router_utils.validators import filter_ids, parse_limit, require_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=SuccessResponse[Page[User]])
@handle_api_errors
async def list_users(
    cursor: str | None = None,
    limit: str | None = None,
    user_service: UserService = Depends(get_user_service),
) -> SuccessResponse[Page[User]]:
    """
    List users one page at a time.

    Args:
        cursor: Cursor returned as ``next`` by the previous page
        limit: Page size; truncated and clamped to at least 1
        user_service: Injected UserService

    Returns:
        SuccessResponse[Page[User]]: Users and next cursor

    Raises:
        400: Malformed cursor
    """
    page = await user_service.list_users(cursor=cursor, limit=parse_limit(limit))
    return ok(page)


@router.post("", response_model=SuccessResponse[User])
@handle_api_errors
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> SuccessResponse[User]:
    """Create a user from a non-blank name."""
    name = require_text(request.name, "name")
    user = await user_service.create_user(name)
    return ok(user)


@router.delete("/{user_id}", response_model=SuccessResponse[DeleteResult])
@handle_api_errors
async def delete_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> SuccessResponse[DeleteResult]:
    """Delete a user; unknown IDs report ``deleted: false``."""
    deleted = await user_service.delete_user(user_id)
    return ok(DeleteResult(id=user_id, deleted=deleted))


@router.post("/deleteMany", response_model=SuccessResponse[DeleteManyResult])
@handle_api_errors
async def delete_users(
    request: DeleteManyRequest,
    user_service: UserService = Depends(get_user_service),
) -> SuccessResponse[DeleteManyResult]:
    """
    Delete several users.

    Args:
        request: DeleteManyRequest; non-string ids are ignored
        user_service: Injected UserService

    Returns:
        SuccessResponse[DeleteManyResult]: ``{deletedCount, ids}``

    Raises:
        400: No usable ids
    """
    ids = filter_ids(request.ids)
    count = await user_service.delete_users(ids)
    return ok(DeleteManyResult(deleted_count=count, ids=ids))
