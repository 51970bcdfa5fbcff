"""Organization service for business rules around the repository."""

import logging
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from ....core.exceptions import ConflictError
from ....models.pagination import PaginationParams
from ....utils.uuid import generate_uuid_v7
from ..entities import Organization
from ..repositories import OrganizationRepository

logger = logging.getLogger(__name__)


class OrganizationService:
    """Organization service implementation."""

    def __init__(self, organization_repository: OrganizationRepository):
        """Initialize service with repository."""
        self.repository = organization_repository

    async def _ensure_name_available(self, name: str, exclude_id: Optional[UUID] = None) -> None:
        existing = await self.repository.find_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(
                f"Organization with name '{name}' already exists",
                details={"field": "name"}
            )

    async def create_organization(
        self,
        name: str,
        description: Optional[str] = None,
    ) -> Organization:
        """Create new organization with validation."""
        await self._ensure_name_available(name)

        organization = Organization(
            id=generate_uuid_v7(),
            name=name,
            description=description,
            is_active=True,
        )

        # A concurrent insert of the same name still surfaces as Conflict
        return await self.repository.create(organization)

    async def get_organization(self, organization_id: UUID) -> Organization:
        """Get organization by ID."""
        return await self.repository.find_by_id(organization_id)

    async def update_organization(
        self,
        organization_id: UUID,
        updates: Dict[str, Any],
    ) -> Organization:
        """Update organization with validation."""
        if not updates:
            return await self.repository.find_by_id(organization_id)

        name = updates.get("name")
        if name is not None:
            current = await self.repository.find_by_id(organization_id)
            if name != current.name:
                await self._ensure_name_available(name, exclude_id=organization_id)

        return await self.repository.update(organization_id, updates)

    async def delete_organization(self, organization_id: UUID) -> None:
        """Soft delete organization."""
        await self.repository.soft_delete(organization_id)

    async def list_organizations(
        self,
        params: PaginationParams,
    ) -> Tuple[List[Organization], int]:
        """List one page of organizations together with the live total."""
        organizations = await self.repository.list(params)
        total = await self.repository.count()
        logger.debug(f"Listed {len(organizations)} of {total} organizations (page {params.page})")
        return organizations, total
