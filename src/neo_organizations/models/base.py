"""
Base models for API requests and responses.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        use_enum_values=True,
        validate_assignment=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class ResponseStatus(str, Enum):
    """Envelope status values."""
    SUCCESS = "success"
    ERROR = "error"


T = TypeVar('T')


class APIResponse(BaseSchema, Generic[T]):
    """Standard API response envelope."""
    data: Optional[T] = Field(None, description="Response payload")
    error: Optional[str] = Field(None, description="Client-safe error message")
    status: ResponseStatus = Field(description="Outcome of the request")

    @classmethod
    def success_response(cls, data: Optional[T] = None) -> "APIResponse[T]":
        """Create a success envelope."""
        return cls(data=data, error=None, status=ResponseStatus.SUCCESS)

    @classmethod
    def error_response(cls, error: str) -> "APIResponse[T]":
        """Create an error envelope."""
        return cls(data=None, error=error, status=ResponseStatus.ERROR)


class HealthCheckResponse(BaseSchema):
    """Health check payload."""
    status: str = Field(description="Overall service status")
    database: str = Field(description="Database status")
    version: str = Field(description="Service version")
    timestamp: datetime = Field(default_factory=utc_now)
