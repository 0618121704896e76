"""
Response envelope utilities.

Every successful route returns ``{"success": true, "data": ...}``.

Dependencies: aksara.models.common
System role: Success envelope construction
"""

from typing import Any

from aksara.models.common import SuccessResponse


def ok(data: Any) -> SuccessResponse:
    """
    Wrap route output in the success envelope.

    Args:
        data: Payload placed under ``data``

    Returns:
        SuccessResponse: Envelope validated against the route's response_model
    """
    return SuccessResponse(data=data)
