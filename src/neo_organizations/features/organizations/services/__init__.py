from .organization_service import OrganizationService

__all__ = ["OrganizationService"]
