"""Organization response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from ....models.base import BaseSchema
from ..entities import Organization


class OrganizationResponse(BaseSchema):
    """Response model for organizations."""

    id: UUID = Field(..., description="Organization ID")
    name: str = Field(..., description="Organization name")
    description: Optional[str] = Field(None, description="Description")
    is_active: bool = Field(..., description="Active status")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(cls, organization: Organization) -> "OrganizationResponse":
        """Create response from organization entity."""
        return cls(
            id=organization.id,
            name=organization.name,
            description=organization.description,
            is_active=organization.is_active,
            created_at=organization.created_at,
            updated_at=organization.updated_at,
        )


class OrganizationEnvelope(BaseSchema):
    """Payload wrapper for single-organization responses."""

    organization: OrganizationResponse

    @classmethod
    def from_entity(cls, organization: Organization) -> "OrganizationEnvelope":
        return cls(organization=OrganizationResponse.from_entity(organization))
