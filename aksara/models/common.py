"""
Common response models and utilities.

Generic response wrappers, pagination page and shared record base.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any, Generic, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# Upper bound on records returned by one listing call
MAX_PAGE_SIZE = 1000


class Record(BaseModel):
    """
    Base for every stored record.

    Records are serialized to the backing store with their wire (camelCase)
    field names, so ``model_dump(by_alias=True)`` and ``model_validate``
    round-trip the stored JSON.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Record ID, unique per collection")


class SuccessResponse(BaseModel, Generic[T]):
    """Generic success response wrapper."""

    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")


class Page(BaseModel, Generic[T]):
    """One page of a cursor-paginated listing."""

    items: list[T]
    next: str | None = Field(
        default=None,
        description="Opaque cursor for the following page, null when exhausted",
    )


class DeleteManyRequest(BaseModel):
    """Request schema for bulk deletion; non-string ids are dropped."""

    ids: Any = None


class DeleteResult(BaseModel):
    """Outcome of a single delete."""

    id: str
    deleted: bool


class DeleteManyResult(BaseModel):
    """Outcome of a bulk delete."""

    model_config = ConfigDict(populate_by_name=True)

    deleted_count: int = Field(..., alias="deletedCount")
    ids: list[str]
