"""Shared API models."""

from .base import APIResponse, BaseSchema, HealthCheckResponse, ResponseStatus, utc_now
from .pagination import PaginatedResponse, PaginationMeta, PaginationParams

__all__ = [
    "APIResponse",
    "BaseSchema",
    "HealthCheckResponse",
    "ResponseStatus",
    "utc_now",
    "PaginatedResponse",
    "PaginationMeta",
    "PaginationParams",
]
