"""
Exception hierarchy for the Aksara application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class AksaraException(Exception):
    """Base exception for all Aksara application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(AksaraException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidCursorError(ValidationError):
    """Raised when a pagination cursor cannot be decoded."""

    def __init__(self, cursor: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["cursor"] = cursor
        super().__init__("invalid cursor", field="cursor", details=details)


class EntityNotFoundError(AksaraException):
    """Raised when a referenced entity does not exist."""

    def __init__(
        self,
        collection: str,
        entity_id: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            collection: Collection name the lookup ran against
            entity_id: ID of the missing entity
            message: Optional client-facing message
            details: Additional context
        """
        details = details or {}
        details.update({"collection": collection, "entity_id": entity_id})
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(message or f"{collection} not found", details)


class ConflictError(AksaraException):
    """Raised when creating an entity whose ID is already taken."""

    def __init__(
        self,
        collection: str,
        entity_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details.update({"collection": collection, "entity_id": entity_id})
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"{collection} {entity_id} already exists", details)


class StoreError(AksaraException):
    """Raised when the backing key-value store fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Store operation that failed (get, insert, scan, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
