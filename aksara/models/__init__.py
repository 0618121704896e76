"""
API and record schemas.

Exports:
  - SuccessResponse, ErrorResponse, Page: Envelope and pagination wrappers
  - Thought, User, ChatBoard, ChatMessage: Stored record shapes
"""

from aksara.models.common import ErrorResponse, Page, SuccessResponse
from aksara.models.thought import Thought
from aksara.models.user import User
from aksara.models.chat import ChatBoard, ChatMessage

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
    "Page",
    "Thought",
    "User",
    "ChatBoard",
    "ChatMessage",
]
