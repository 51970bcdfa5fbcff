"""Test doubles and builders shared across the test suite."""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID

from neo_organizations.core.exceptions import (
    RecordNotFoundError,
    UniqueViolationError,
    to_api_error,
)
from neo_organizations.features.organizations.entities import Organization
from neo_organizations.models.pagination import PaginationParams
from neo_organizations.repositories.base import BaseRepository
from neo_organizations.utils.uuid import generate_uuid_v7


class InMemoryOrganizationRepository(BaseRepository[Organization]):
    """Organization repository backed by a dict, with the same error contract."""

    entity_name = "Organization"

    def __init__(self):
        self.rows: Dict[UUID, Organization] = {}

    def _live(self) -> List[Organization]:
        # dicts keep insertion order, matching ORDER BY created_at, id
        return [org for org in self.rows.values() if not org.is_deleted]

    def _not_found(self, organization_id: UUID):
        return to_api_error(RecordNotFoundError(
            str(organization_id),
            client_message=f"Organization {organization_id} not found"
        ))

    def _check_unique(self, name: str, exclude_id: Optional[UUID] = None) -> None:
        for org in self._live():
            if org.name == name and org.id != exclude_id:
                raise to_api_error(UniqueViolationError(
                    "organizations_name_live_key",
                    client_message=f"Organization with name '{name}' already exists"
                ))

    async def find_by_id(self, organization_id: UUID) -> Organization:
        org = self.rows.get(organization_id)
        if org is None or org.is_deleted:
            raise self._not_found(organization_id)
        return org

    async def find_by_name(self, name: str) -> Optional[Organization]:
        for org in self._live():
            if org.name == name:
                return org
        return None

    async def create(self, organization: Organization) -> Organization:
        self._check_unique(organization.name)
        self.rows[organization.id] = organization
        return organization

    async def update(self, organization_id: UUID, data: Dict[str, Any]) -> Organization:
        org = await self.find_by_id(organization_id)
        if "name" in data:
            self._check_unique(data["name"], exclude_id=organization_id)
        updated = replace(org, **data, updated_at=datetime.now(timezone.utc))
        self.rows[organization_id] = updated
        return updated

    async def soft_delete(self, organization_id: UUID) -> None:
        org = await self.find_by_id(organization_id)
        now = datetime.now(timezone.utc)
        self.rows[organization_id] = replace(org, deleted_at=now, is_active=False, updated_at=now)

    async def list(self, params: PaginationParams) -> List[Organization]:
        return self._live()[params.offset:params.offset + params.limit]

    async def count(self) -> int:
        return len(self._live())


def make_organization(name: str = "Acme Corp", **kwargs) -> Organization:
    """Build an organization entity with a fresh UUIDv7 id."""
    return Organization(id=kwargs.pop("id", generate_uuid_v7()), name=name, **kwargs)


def make_row(organization: Organization) -> Dict[str, Any]:
    """Database row shape for an organization."""
    return {
        "id": organization.id,
        "name": organization.name,
        "description": organization.description,
        "is_active": organization.is_active,
        "created_at": organization.created_at,
        "updated_at": organization.updated_at,
        "deleted_at": organization.deleted_at,
    }
