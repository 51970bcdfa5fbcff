from .requests import CreateOrganizationRequest, UpdateOrganizationRequest
from .responses import OrganizationEnvelope, OrganizationResponse

__all__ = [
    "CreateOrganizationRequest",
    "UpdateOrganizationRequest",
    "OrganizationEnvelope",
    "OrganizationResponse",
]
