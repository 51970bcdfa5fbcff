from .organization_repository import OrganizationRepository

__all__ = ["OrganizationRepository"]
