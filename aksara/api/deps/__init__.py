"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_settings_dependency,
    get_thought_service,
    get_user_service,
)

__all__ = [
    "get_chat_service",
    "get_settings_dependency",
    "get_thought_service",
    "get_user_service",
]
