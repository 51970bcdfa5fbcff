"""Organization domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from ....models.base import utc_now


@dataclass
class Organization:
    """Organization domain entity.

    Matches the ``organizations`` table. A row with ``deleted_at`` set is
    soft deleted and invisible to every read.
    """

    id: UUID
    name: str
    description: Optional[str] = None
    is_active: bool = True

    # Audit fields
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Check if organization is soft deleted."""
        return self.deleted_at is not None
