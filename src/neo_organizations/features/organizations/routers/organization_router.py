"""Organization CRUD router."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status

from ....models.base import APIResponse
from ....models.pagination import PaginatedResponse, PaginationParams
from ..models import (
    CreateOrganizationRequest,
    OrganizationEnvelope,
    OrganizationResponse,
    UpdateOrganizationRequest,
)
from ..services import OrganizationService
from .dependencies import get_organization_service, get_pagination_params

logger = logging.getLogger(__name__)


router = APIRouter(
    prefix="/organizations",
    tags=["Organizations"],
    responses={
        400: {"description": "Invalid request"},
        500: {"description": "Internal server error"}
    }
)


@router.post(
    "",
    response_model=APIResponse[OrganizationEnvelope],
    status_code=status.HTTP_201_CREATED,
    summary="Create organization",
    responses={409: {"description": "Organization with name already exists"}}
)
async def create_organization(
    request: CreateOrganizationRequest,
    service: OrganizationService = Depends(get_organization_service)
) -> APIResponse[OrganizationEnvelope]:
    """Create new organization."""
    logger.debug(f"Attempting to create organization '{request.name}'")

    organization = await service.create_organization(
        name=request.name,
        description=request.description,
    )

    logger.info(f"Created organization {organization.id} ('{organization.name}')")
    return APIResponse[OrganizationEnvelope].success_response(OrganizationEnvelope.from_entity(organization))


@router.get(
    "",
    response_model=PaginatedResponse[OrganizationResponse],
    summary="List organizations"
)
async def list_organizations(
    params: PaginationParams = Depends(get_pagination_params),
    service: OrganizationService = Depends(get_organization_service)
) -> PaginatedResponse[OrganizationResponse]:
    """List organizations using limit/offset pagination."""
    organizations, total = await service.list_organizations(params)

    return PaginatedResponse[OrganizationResponse].create(
        items=[OrganizationResponse.from_entity(org) for org in organizations],
        total=total,
        params=params,
    )


@router.get(
    "/{organization_id}",
    response_model=APIResponse[OrganizationEnvelope],
    summary="Get organization by ID",
    responses={404: {"description": "Organization not found"}}
)
async def get_organization(
    organization_id: UUID = Path(..., description="Organization ID"),
    service: OrganizationService = Depends(get_organization_service)
) -> APIResponse[OrganizationEnvelope]:
    """Get organization by ID."""
    organization = await service.get_organization(organization_id)
    return APIResponse[OrganizationEnvelope].success_response(OrganizationEnvelope.from_entity(organization))


@router.put(
    "/{organization_id}",
    response_model=APIResponse[OrganizationEnvelope],
    summary="Update organization",
    responses={
        404: {"description": "Organization not found"},
        409: {"description": "Organization with name already exists"}
    }
)
async def update_organization(
    request: UpdateOrganizationRequest,
    organization_id: UUID = Path(..., description="Organization ID"),
    service: OrganizationService = Depends(get_organization_service)
) -> APIResponse[OrganizationEnvelope]:
    """Update organization fields present in the request body."""
    updates = request.model_dump(exclude_unset=True)
    logger.debug(f"Attempting to update organization {organization_id}: {sorted(updates)}")

    organization = await service.update_organization(organization_id, updates)

    logger.info(f"Updated organization {organization_id}")
    return APIResponse[OrganizationEnvelope].success_response(OrganizationEnvelope.from_entity(organization))


@router.delete(
    "/{organization_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete organization",
    responses={404: {"description": "Organization not found"}}
)
async def delete_organization(
    organization_id: UUID = Path(..., description="Organization ID"),
    service: OrganizationService = Depends(get_organization_service)
) -> Response:
    """Soft delete organization."""
    logger.debug(f"Attempting to delete organization {organization_id}")

    await service.delete_organization(organization_id)

    logger.info(f"Deleted organization {organization_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
