"""
Thought domain models and schemas.

Dependencies: pydantic
System role: Thought record and API contracts
"""

from pydantic import BaseModel, Field

from aksara.models.common import Record

MAX_THOUGHT_LENGTH = 500
DEFAULT_AUTHOR = "anonymous"


class Thought(Record):
    """An anonymous short text entry."""

    text: str = Field(..., max_length=MAX_THOUGHT_LENGTH)
    author: str = DEFAULT_AUTHOR
    created_at: int = Field(..., alias="createdAt", description="Epoch milliseconds")


class CreateThoughtRequest(BaseModel):
    """
    Request body for posting a thought.

    Fields are optional so that missing values reach the route validators
    and come back as a 400 envelope.
    """

    text: str | None = None
    author: str | None = None
