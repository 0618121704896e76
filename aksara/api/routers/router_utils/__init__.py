"""Shared helpers for API routers."""

from .error_handling import error_response, handle_api_errors, register_exception_handlers
from .responses import ok

__all__ = [
    "error_response",
    "handle_api_errors",
    "register_exception_handlers",
    "ok",
]
