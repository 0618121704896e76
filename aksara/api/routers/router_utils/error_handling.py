"""
API error handling utilities.

Provides a decorator mapping the domain exception hierarchy to error
envelopes, and application-level handlers for failures raised outside
route bodies (request parsing, unknown routes).

Dependencies: fastapi, starlette, aksara.core.exceptions
System role: Uniform ``{"success": false, "error": ...}`` responses
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from aksara.core.exceptions import (
    ConflictError,
    EntityNotFoundError,
    StoreError,
    ValidationError,
)
from aksara.models.common import ErrorResponse
from aksara.observability.log_utils import safe_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_MESSAGE = "internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """
    Build an error envelope response.

    Args:
        status_code: HTTP status code
        message: Client-facing error message

    Returns:
        JSONResponse: ``{"success": false, "error": message}``
    """
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def handle_api_errors(func: F) -> F:
    """
    Decorator turning domain errors raised by a route into error envelopes.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ValidationError as e:
            logger.warning(
                "Invalid request",
                extra=safe_context(route=func.__name__, error=str(e)),
            )
            return error_response(status.HTTP_400_BAD_REQUEST, e.message)

        except EntityNotFoundError as e:
            logger.warning(
                "Entity not found",
                extra={"route": func.__name__, "collection": e.collection, "entity_id": e.entity_id},
            )
            return error_response(status.HTTP_404_NOT_FOUND, e.message)

        except ConflictError as e:
            logger.warning(
                "Entity already exists",
                extra={"route": func.__name__, "collection": e.collection, "entity_id": e.entity_id},
            )
            return error_response(status.HTTP_409_CONFLICT, e.message)

        except StoreError as e:
            logger.error(
                "Backing store failure",
                extra=safe_context(route=func.__name__, error=str(e)),
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

        except Exception as e:
            logger.exception(
                "Unexpected failure in route",
                extra=safe_context(route=func.__name__, error=str(e)),
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    return wrapper  # type: ignore


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "invalid JSON body"
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or wrongly typed request data is a client error."""
    message = _describe_validation_error(exc)
    logger.warning(
        "Request validation failed",
        extra=safe_context(path=request.url.path, error=message),
    )
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework HTTP errors (404 route, 405 method) in the envelope."""
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for failures outside decorated routes."""
    logger.exception(
        "Unhandled exception",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on an app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
