"""
Application services.

Each service wraps one request-scoped session, calls the CRUD layer and
commits its own writes.
"""

from aksara.application.services.thought_service import ThoughtService
from aksara.application.services.user_service import UserService
from aksara.application.services.chat_service import ChatService

__all__ = ["ThoughtService", "UserService", "ChatService"]
