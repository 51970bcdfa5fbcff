"""Organization router dependencies.

The chain is connection -> repository -> service. Tests replace any link via
``app.dependency_overrides``.
"""

from typing import AsyncIterator, Optional

from asyncpg import Connection
from fastapi import Depends, Query, Request

from ....config.settings import Settings
from ....core.exceptions import ValidationError
from ....database.connection import DatabaseManager, get_database
from ....models.pagination import PaginationParams
from ..repositories import OrganizationRepository
from ..services import OrganizationService

# Largest offset PostgreSQL accepts (bigint)
MAX_OFFSET = 2**63 - 1


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_database_manager() -> DatabaseManager:
    """Process-wide database manager."""
    return get_database()


async def get_connection(
    db: DatabaseManager = Depends(get_database_manager),
) -> AsyncIterator[Connection]:
    """Check out a pooled connection for the duration of the request."""
    async with db.acquire() as connection:
        yield connection


async def get_organization_repository(
    connection: Connection = Depends(get_connection),
    settings: Settings = Depends(get_app_settings),
) -> OrganizationRepository:
    """Organization repository bound to the request's connection."""
    return OrganizationRepository(connection, schema=settings.db_schema)


async def get_organization_service(
    repository: OrganizationRepository = Depends(get_organization_repository),
) -> OrganizationService:
    return OrganizationService(repository)


def get_pagination_params(
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of items to return"),
    offset: int = Query(0, ge=0, le=MAX_OFFSET, description="Number of items to skip"),
    settings: Settings = Depends(get_app_settings),
) -> PaginationParams:
    """Convert ``limit``/``offset`` query parameters into a page request.

    ``offset`` must be a multiple of ``limit``; otherwise the page boundary
    would silently shift.
    """
    if limit is None:
        limit = settings.default_page_size

    if limit > settings.max_page_size:
        raise ValidationError(
            f"limit must not exceed {settings.max_page_size}",
            field="limit"
        )

    if offset % limit != 0:
        raise ValidationError(
            f"offset must be a multiple of limit ({limit})",
            field="offset"
        )

    return PaginationParams(page=offset // limit + 1, per_page=limit)
