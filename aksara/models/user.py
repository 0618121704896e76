"""
User domain models and schemas.

Dependencies: pydantic
System role: User record and API contracts
"""

from pydantic import BaseModel

from aksara.models.common import Record


class User(Record):
    """Demo user."""

    name: str


class CreateUserRequest(BaseModel):
    """Request schema for creating a user."""

    name: str | None = None
