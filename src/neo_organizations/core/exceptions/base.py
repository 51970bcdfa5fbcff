"""Base API exceptions for neo-organizations.

Every failure that reaches the HTTP layer is an ``ApiError``: a category code,
a client-safe message and optional structured details. The underlying cause is
kept on ``source`` for logging and diagnostics and is never serialized to the
client.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Client-visible error categories."""
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    DATABASE_ERROR = "DatabaseError"
    CONNECTION_POOL_ERROR = "ConnectionPoolError"
    VALIDATION_ERROR = "ValidationError"
    INTERNAL_ERROR = "InternalError"


DEFAULT_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.NOT_FOUND: "Resource not found",
    ErrorCode.CONFLICT: "Resource already exists",
    ErrorCode.DATABASE_ERROR: "Database operation failed",
    ErrorCode.CONNECTION_POOL_ERROR: "Database connection unavailable",
    ErrorCode.VALIDATION_ERROR: "Invalid request",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred",
}


class ApiError(Exception):
    """Base exception for all errors surfaced through the API.

    Args:
        code: Error category
        message: Human readable, client-safe message
        details: Structured context, logged but not returned to clients
        source: Underlying error kept for diagnostics
    """

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[BaseException] = None,
    ):
        self.code = code
        self.message = message or DEFAULT_MESSAGES[code]
        self.details = details or {}
        self.source = source
        super().__init__(self.message)

    def with_source(self, source: BaseException) -> "ApiError":
        """Attach the underlying cause and return self for chaining."""
        self.source = source
        self.__cause__ = source
        return self

    @property
    def status_code(self) -> int:
        """HTTP status code for this error's category."""
        from .http_mapping import get_http_status_code
        return get_http_status_code(self)

    def to_dict(self) -> Dict[str, Any]:
        """Diagnostic representation used for logging."""
        data = {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }
        if self.source is not None:
            data["source"] = f"{type(self.source).__name__}: {self.source}"
        return data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value!r}, message={self.message!r})"


class NotFoundError(ApiError):
    """Raised when a live resource does not exist."""

    def __init__(self, message: Optional[str] = None, **kwargs):
        super().__init__(ErrorCode.NOT_FOUND, message, **kwargs)


class ConflictError(ApiError):
    """Raised when a request collides with existing data."""

    def __init__(self, message: Optional[str] = None, **kwargs):
        super().__init__(ErrorCode.CONFLICT, message, **kwargs)


class ValidationError(ApiError):
    """Raised when request input is malformed."""

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None, **kwargs):
        super().__init__(ErrorCode.VALIDATION_ERROR, message, **kwargs)
        if field:
            self.details["field"] = field
