"""Database-related exceptions for neo-organizations.

Low-level persistence failures are classified into a small, closed set of
categories before they leave the data layer. Each category maps to exactly
one API error code (see ``CATEGORY_CODES``).
"""

import asyncio
from typing import Dict, Optional, Type

import asyncpg

from .base import ApiError, ErrorCode


class DatabaseError(Exception):
    """Base class for persistence failures.

    Args:
        detail: Diagnostic text, usually the driver message
        client_message: Message safe to show to API clients; when omitted the
            category's default message is used instead of ``detail``
    """

    prefix = "Database error"

    def __init__(self, detail: str = "", client_message: Optional[str] = None):
        self.detail = detail
        self.client_message = client_message
        super().__init__(f"{self.prefix}: {detail}" if detail else self.prefix)


class ConnectionFailedError(DatabaseError):
    """Raised when the database cannot be reached."""
    prefix = "Database connection failed"


class QueryFailedError(DatabaseError):
    """Raised when a statement fails to execute."""
    prefix = "Database query failed"


class RecordNotFoundError(DatabaseError):
    """Raised when no live row matches."""
    prefix = "Record not found"


class UniqueViolationError(DatabaseError):
    """Raised when a uniqueness constraint is violated."""
    prefix = "Unique constraint violation"


class TransactionFailedError(DatabaseError):
    """Raised when a transaction cannot be committed or is in a bad state."""
    prefix = "Transaction failed"


class PoolError(DatabaseError):
    """Raised when no pooled connection can be checked out."""
    prefix = "Connection pool error"


CATEGORY_CODES: Dict[Type[DatabaseError], ErrorCode] = {
    ConnectionFailedError: ErrorCode.CONNECTION_POOL_ERROR,
    PoolError: ErrorCode.CONNECTION_POOL_ERROR,
    QueryFailedError: ErrorCode.DATABASE_ERROR,
    TransactionFailedError: ErrorCode.DATABASE_ERROR,
    RecordNotFoundError: ErrorCode.NOT_FOUND,
    UniqueViolationError: ErrorCode.CONFLICT,
}


def classify_driver_error(error: BaseException) -> DatabaseError:
    """Classify an asyncpg or OS level error into a persistence category.

    The returned error carries the driver message as ``detail`` and has the
    original error chained as ``__cause__``.
    """
    if isinstance(error, DatabaseError):
        return error

    detail = str(error) or type(error).__name__

    # TimeoutError subclasses OSError, so it is checked before connection errors
    if isinstance(error, asyncpg.exceptions.UniqueViolationError):
        classified: DatabaseError = UniqueViolationError(detail)
    elif isinstance(error, asyncio.TimeoutError):
        classified = QueryFailedError(f"timed out: {detail}")
    elif isinstance(
        error,
        (
            asyncpg.exceptions.PostgresConnectionError,
            asyncpg.exceptions.ConnectionDoesNotExistError,
            OSError,
        ),
    ):
        classified = ConnectionFailedError(detail)
    elif isinstance(
        error,
        (asyncpg.exceptions.TransactionRollbackError, asyncpg.exceptions.InvalidTransactionStateError),
    ):
        classified = TransactionFailedError(detail)
    elif isinstance(error, asyncpg.exceptions.TooManyConnectionsError):
        classified = PoolError(detail)
    else:
        classified = QueryFailedError(detail)

    classified.__cause__ = error
    return classified


def to_api_error(error: DatabaseError) -> ApiError:
    """Translate a persistence failure into the API error taxonomy.

    Driver text stays on the source error; the client only sees the
    category message or an explicit ``client_message``.
    """
    code = ErrorCode.DATABASE_ERROR
    for error_type in type(error).__mro__:
        if error_type in CATEGORY_CODES:
            code = CATEGORY_CODES[error_type]
            break

    api_error = ApiError(
        code,
        error.client_message,
        details={"error_type": type(error).__name__},
    )
    return api_error.with_source(error)
