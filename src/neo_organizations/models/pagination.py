"""
Pagination models for API responses.

Page numbers are 1-based. ``PaginationParams`` enforces ``page >= 1`` and
``per_page > 0``; ``PaginationMeta.create`` assumes valid input and never fails.
"""

from typing import Generic, List, TypeVar

from pydantic import Field

from .base import APIResponse, BaseSchema, ResponseStatus

T = TypeVar('T')

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10


class PaginationParams(BaseSchema):
    """Requested page and page size."""
    page: int = Field(DEFAULT_PAGE, ge=1, description="Page number")
    per_page: int = Field(DEFAULT_PER_PAGE, ge=1, description="Items per page")

    @property
    def offset(self) -> int:
        """Calculate offset for database query."""
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        """Get limit for database query."""
        return self.per_page


class PaginationMeta(BaseSchema):
    """Metadata for paginated responses."""
    current_page: int = Field(description="Current page number")
    per_page: int = Field(description="Number of items per page")
    total_items: int = Field(description="Total number of items")
    total_pages: int = Field(description="Total number of pages")
    has_next_page: bool = Field(description="Whether there is a next page")
    has_previous_page: bool = Field(description="Whether there is a previous page")

    @classmethod
    def create(cls, total: int, params: PaginationParams) -> "PaginationMeta":
        """Create pagination metadata from a total count and the requested page."""
        total_pages = (total + params.per_page - 1) // params.per_page

        return cls(
            current_page=params.page,
            per_page=params.per_page,
            total_items=total,
            total_pages=total_pages,
            has_next_page=params.page < total_pages,
            has_previous_page=params.page > 1
        )


class PaginatedResponse(APIResponse[List[T]], Generic[T]):
    """Envelope for list endpoints, carrying one page of items and its meta."""
    meta: PaginationMeta = Field(description="Pagination metadata")

    @classmethod
    def create(
        cls,
        items: List[T],
        total: int,
        params: PaginationParams
    ) -> "PaginatedResponse[T]":
        """Create a paginated success envelope."""
        return cls(
            data=items,
            error=None,
            status=ResponseStatus.SUCCESS,
            meta=PaginationMeta.create(total, params)
        )
