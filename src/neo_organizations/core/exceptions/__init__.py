"""
Exception handling for neo-organizations.

Two layers: ``DatabaseError`` categories raised by the data layer, and
``ApiError`` raised towards the HTTP layer. ``to_api_error`` is the single
translation point between them.
"""

from .base import (
    ApiError,
    ErrorCode,
    NotFoundError,
    ConflictError,
    ValidationError,
    DEFAULT_MESSAGES,
)

from .database import (
    DatabaseError,
    ConnectionFailedError,
    QueryFailedError,
    RecordNotFoundError,
    UniqueViolationError,
    TransactionFailedError,
    PoolError,
    classify_driver_error,
    to_api_error,
)

from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    # API errors
    "ApiError",
    "ErrorCode",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "DEFAULT_MESSAGES",
    # Persistence categories
    "DatabaseError",
    "ConnectionFailedError",
    "QueryFailedError",
    "RecordNotFoundError",
    "UniqueViolationError",
    "TransactionFailedError",
    "PoolError",
    "classify_driver_error",
    "to_api_error",
    # HTTP mapping
    "HTTP_STATUS_MAP",
    "get_http_status_code",
]
