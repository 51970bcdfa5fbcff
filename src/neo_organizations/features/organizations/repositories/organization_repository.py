"""Organization repository for data access over an asyncpg connection."""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

import asyncpg
from asyncpg import Connection

from ....core.exceptions import RecordNotFoundError, UniqueViolationError
from ....models.pagination import PaginationParams
from ....repositories.base import BaseRepository
from ..entities import Organization
from .queries import (
    ORGANIZATION_COUNT,
    ORGANIZATION_DELETE_SOFT,
    ORGANIZATION_GET_BY_ID,
    ORGANIZATION_GET_BY_NAME,
    ORGANIZATION_INSERT,
    ORGANIZATION_LIST,
    ORGANIZATION_UPDATE,
)

logger = logging.getLogger(__name__)


class OrganizationRepository(BaseRepository[Organization]):
    """Organization repository bound to one checked-out connection."""

    entity_name = "Organization"

    # Columns callers may change through ``update``
    UPDATABLE_FIELDS = ("name", "description", "is_active")

    # Insertion order; UUIDv7 ids break ties between equal timestamps
    order_by = "created_at ASC, id ASC"

    def __init__(self, connection: Connection, schema: str = "admin"):
        """Initialize repository.

        Args:
            connection: Connection checked out for the current request
            schema: Schema holding the organizations table
        """
        self.connection = connection
        self.schema = schema

    def _query(self, template: str, **kwargs) -> str:
        return template.format(schema=self.schema, **kwargs)

    def _not_found(self, organization_id: UUID) -> RecordNotFoundError:
        return RecordNotFoundError(
            f"organizations.id={organization_id}",
            client_message=f"Organization {organization_id} not found"
        )

    async def find_by_id(self, organization_id: UUID) -> Organization:
        """Get a live organization by ID."""
        async with self.translate_errors("find_by_id"):
            row = await self.connection.fetchrow(
                self._query(ORGANIZATION_GET_BY_ID), organization_id
            )
            if row is None:
                raise self._not_found(organization_id)
            return self._row_to_organization(row)

    async def find_by_name(self, name: str) -> Optional[Organization]:
        """Get a live organization by name, or None."""
        async with self.translate_errors("find_by_name"):
            row = await self.connection.fetchrow(self._query(ORGANIZATION_GET_BY_NAME), name)
            return self._row_to_organization(row) if row else None

    async def create(self, organization: Organization) -> Organization:
        """Insert a new organization."""
        async with self.translate_errors("create"):
            try:
                row = await self.connection.fetchrow(
                    self._query(ORGANIZATION_INSERT),
                    organization.id,
                    organization.name,
                    organization.description,
                    organization.is_active,
                    organization.created_at,
                    organization.updated_at,
                )
            except asyncpg.exceptions.UniqueViolationError as e:
                error = UniqueViolationError(
                    str(e),
                    client_message=f"Organization with name '{organization.name}' already exists"
                )
                error.__cause__ = e
                raise error
            return self._row_to_organization(row)

    async def update(self, organization_id: UUID, data: Dict[str, Any]) -> Organization:
        """Update fields of a live organization.

        Keys outside ``UPDATABLE_FIELDS`` are ignored. An empty change set
        returns the current row.
        """
        changes = {key: value for key, value in data.items() if key in self.UPDATABLE_FIELDS}
        if not changes:
            return await self.find_by_id(organization_id)

        assignments = []
        params: List[Any] = [organization_id]
        for column, value in changes.items():
            params.append(value)
            assignments.append(f"{column} = ${len(params)}")

        query = self._query(ORGANIZATION_UPDATE, assignments=",\n        ".join(assignments))

        async with self.translate_errors("update"):
            try:
                row = await self.connection.fetchrow(query, *params)
            except asyncpg.exceptions.UniqueViolationError as e:
                error = UniqueViolationError(
                    str(e),
                    client_message=f"Organization with name '{changes.get('name')}' already exists"
                )
                error.__cause__ = e
                raise error
            if row is None:
                raise self._not_found(organization_id)
            return self._row_to_organization(row)

    async def soft_delete(self, organization_id: UUID) -> None:
        """Soft delete an organization."""
        async with self.translate_errors("soft_delete"):
            deleted_id = await self.connection.fetchval(
                self._query(ORGANIZATION_DELETE_SOFT), organization_id
            )
            if deleted_id is None:
                raise self._not_found(organization_id)

    async def list(self, params: PaginationParams) -> List[Organization]:
        """List one page of live organizations."""
        async with self.translate_errors("list"):
            rows = await self.connection.fetch(
                self._query(ORGANIZATION_LIST, order_by=self.order_by),
                params.limit,
                params.offset,
            )
            return [self._row_to_organization(row) for row in rows]

    async def count(self) -> int:
        """Count live organizations."""
        async with self.translate_errors("count"):
            result = await self.connection.fetchval(self._query(ORGANIZATION_COUNT))
            return result or 0

    def _row_to_organization(self, row) -> Organization:
        """Convert database row to Organization entity."""
        return Organization(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            is_active=row["is_active"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            deleted_at=row["deleted_at"]
        )
