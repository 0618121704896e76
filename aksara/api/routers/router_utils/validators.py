"""
Request validation utilities.

Business rules not covered by the loose Pydantic request models. Every
check runs before any store access and raises ValidationError, which the
routes turn into a 400 envelope.

Dependencies: aksara.core.exceptions, aksara.models.thought
System role: Route boundary validation
"""

import math
from typing import Any

from aksara.core.exceptions import ValidationError
from aksara.models.common import MAX_PAGE_SIZE
from aksara.models.thought import DEFAULT_AUTHOR, MAX_THOUGHT_LENGTH


def is_str(value: Any) -> bool:
    return isinstance(value, str)


def utf16_length(text: str) -> int:
    """Length of text in UTF-16 code units, as browsers count it."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def validate_thought_text(text: Any) -> str:
    """
    Validate thought text and return it trimmed.

    The length limit applies to the text as submitted, counted in UTF-16
    code units so characters outside the BMP count twice.

    Raises:
        ValidationError: If text is missing, blank, or too long
    """
    if not is_str(text) or not text.strip():
        raise ValidationError("Kata-kata tidak boleh kosong.", field="text")
    if utf16_length(text) > MAX_THOUGHT_LENGTH:
        raise ValidationError(
            f"Kata-kata terlalu panjang (maksimal {MAX_THOUGHT_LENGTH} karakter).",
            field="text",
        )
    return text.strip()


def resolve_author(author: Any) -> str:
    """Trimmed author, or the anonymous default when absent or blank."""
    if is_str(author) and author.strip():
        return author.strip()
    return DEFAULT_AUTHOR


def validate_id(value: Any, message: str = "ID tidak valid.") -> str:
    """
    Validate a path ID.

    Raises:
        ValidationError: If the ID is not a non-blank string
    """
    if not is_str(value) or not value.strip():
        raise ValidationError(message, field="id")
    return value


def require_text(value: Any, field: str) -> str:
    """
    Require a non-blank string field and return it trimmed.

    Raises:
        ValidationError: ``"{field} required"`` otherwise
    """
    if not is_str(value) or not value.strip():
        raise ValidationError(f"{field} required", field=field)
    return value.strip()


def validate_message_fields(user_id: Any, text: Any) -> tuple[str, str]:
    """
    Validate a chat message body.

    Returns:
        (user_id, trimmed text)

    Raises:
        ValidationError: If userId is not a string or text is blank
    """
    if not is_str(user_id) or not is_str(text) or not text.strip():
        raise ValidationError("userId and text required")
    return user_id, text.strip()


def filter_ids(ids: Any) -> list[str]:
    """
    Keep the string entries of an ids list.

    Raises:
        ValidationError: If nothing usable remains
    """
    kept = [item for item in ids if is_str(item)] if isinstance(ids, list) else []
    if not kept:
        raise ValidationError("ids required", field="ids")
    return kept


def parse_limit(raw: str | None) -> int | None:
    """
    Parse the ``limit`` query parameter.

    Numeric input is truncated toward zero and clamped to at least 1;
    anything non-numeric counts as 1. Values above MAX_PAGE_SIZE are capped.
    Absent or empty means "use default".
    """
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if not math.isfinite(value):
        value = 0.0
    return min(max(1, int(value)), MAX_PAGE_SIZE)
