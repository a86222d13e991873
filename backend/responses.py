"""Standardized response infrastructure for API endpoints.

Framework-level errors (validation, routing, unhandled exceptions) use the
structured format with codes and messages. The chat history endpoint keeps
its own fixed error body, built by `fetch_messages_error_response`.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from fastapi.responses import JSONResponse


class ResponseCode(str, Enum):
    """Response codes for API responses.

    Ranges: 0xxx=Success, 1xxx=Client Error, 2xxx=Server Error
    """

    # Success codes
    SUCCESS = "0000"

    # Client errors
    VALIDATION_ERROR = "1000"
    NOT_FOUND = "1001"
    METHOD_NOT_ALLOWED = "1002"

    # Server errors
    INTERNAL_ERROR = "2000"
    MESSAGE_STORE_ERROR = "2001"


# Response messages mapped to codes
RESPONSE_MESSAGES: dict[ResponseCode, str] = {
    ResponseCode.SUCCESS: "Operation completed successfully",
    ResponseCode.VALIDATION_ERROR: "Request validation failed",
    ResponseCode.NOT_FOUND: "Resource not found",
    ResponseCode.METHOD_NOT_ALLOWED: "Method not allowed",
    ResponseCode.INTERNAL_ERROR: "An internal error occurred",
    ResponseCode.MESSAGE_STORE_ERROR: "Error fetching messages",
}

# HTTP status codes for each response code
HTTP_STATUS_MAP: dict[ResponseCode, int] = {
    ResponseCode.SUCCESS: 200,
    ResponseCode.VALIDATION_ERROR: 422,
    ResponseCode.NOT_FOUND: 404,
    ResponseCode.METHOD_NOT_ALLOWED: 405,
    ResponseCode.INTERNAL_ERROR: 500,
    ResponseCode.MESSAGE_STORE_ERROR: 500,
}


def get_message(code: ResponseCode) -> str:
    """Get the message for a response code."""
    return RESPONSE_MESSAGES.get(code, "Unknown error")


def get_http_status(code: ResponseCode) -> int:
    """Get HTTP status code for a response code."""
    return HTTP_STATUS_MAP.get(code, 500)


def error_dict(
    code: ResponseCode,
    custom_message: str | None = None,
    error_details: dict[str, Any] | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """Build a standardized error response dictionary."""
    return {
        "code": code.value,
        "success": False,
        "message": custom_message or get_message(code),
        "timestamp": datetime.now(UTC).isoformat(),
        "request_id": request_id,
        "error_details": error_details,
    }


def fetch_messages_error_response() -> JSONResponse:
    """Create the fixed error response for a failed history lookup.

    The body never carries the underlying cause.
    """
    code = ResponseCode.MESSAGE_STORE_ERROR
    return JSONResponse(
        content={"error": get_message(code)},
        status_code=get_http_status(code),
    )
