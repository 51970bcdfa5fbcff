"""Organization request models."""

from typing import Optional

from pydantic import Field, field_validator

from ....models.base import BaseSchema

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000


class CreateOrganizationRequest(BaseSchema):
    """Request model for creating organizations."""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Organization name, unique among live organizations"
    )
    description: Optional[str] = Field(
        None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Organization description"
    )


class UpdateOrganizationRequest(BaseSchema):
    """Request model for updating organizations.

    Only fields present in the request body are changed.
    """

    name: Optional[str] = Field(
        None,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="New organization name"
    )
    description: Optional[str] = Field(
        None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="New description; null clears it"
    )
    is_active: Optional[bool] = Field(
        None,
        description="Organization active status"
    )

    @field_validator("name", "is_active")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v
