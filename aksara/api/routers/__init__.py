"""API routers."""

from .chats import router as chats_router
from .health import router as health_router
from .thoughts import router as thoughts_router
from .users import router as users_router

__all__ = [
    "chats_router",
    "health_router",
    "thoughts_router",
    "users_router",
]
