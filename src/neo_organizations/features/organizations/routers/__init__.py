from .dependencies import (
    get_app_settings,
    get_connection,
    get_database_manager,
    get_organization_repository,
    get_organization_service,
    get_pagination_params,
)
from .organization_router import router as organization_router

__all__ = [
    "get_app_settings",
    "organization_router",
    "get_connection",
    "get_database_manager",
    "get_organization_repository",
    "get_organization_service",
    "get_pagination_params",
]
