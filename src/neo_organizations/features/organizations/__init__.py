"""Organization management feature."""

from .entities import Organization
from .repositories import OrganizationRepository
from .routers import organization_router
from .services import OrganizationService

__all__ = [
    "Organization",
    "OrganizationRepository",
    "OrganizationService",
    "organization_router",
]
