"""HTTP status code mapping for API error codes."""

from typing import Dict

from .base import ApiError, ErrorCode


HTTP_STATUS_MAP: Dict[ErrorCode, int] = {
    # 400 Bad Request
    ErrorCode.VALIDATION_ERROR: 400,

    # 404 Not Found
    ErrorCode.NOT_FOUND: 404,

    # 409 Conflict
    ErrorCode.CONFLICT: 409,

    # 500 Internal Server Error
    ErrorCode.DATABASE_ERROR: 500,
    ErrorCode.CONNECTION_POOL_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


def get_http_status_code(error: ApiError) -> int:
    """Get HTTP status code for an API error, defaulting to 500."""
    return HTTP_STATUS_MAP.get(error.code, 500)
