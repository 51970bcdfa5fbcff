"""
Base repository contract for persisted entities.

Concrete repositories run their statements inside ``translate_errors`` so that
driver failures are classified and turned into ``ApiError`` in one place.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Generic, List, TypeVar
from uuid import UUID

import asyncpg

from ..core.exceptions import (
    ApiError,
    DatabaseError,
    classify_driver_error,
    to_api_error,
)
from ..models.pagination import PaginationParams

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(ABC, Generic[T]):
    """
    Generic repository over a single database connection.

    Contract for implementations:

    - ``find_by_id`` raises NotFound when no live row matches
    - ``create`` raises Conflict on a uniqueness violation
    - ``update`` and ``soft_delete`` raise NotFound for absent or deleted rows
    - ``list`` returns at most ``params.per_page`` live rows in insertion
      order unless the repository defines its own ordering
    """

    entity_name = "Record"

    @asynccontextmanager
    async def translate_errors(self, operation: str) -> AsyncIterator[None]:
        """Translate persistence failures raised inside the block into ``ApiError``.

        ``ApiError`` raised inside the block passes through untouched.
        """
        try:
            yield
        except ApiError:
            raise
        except (
            DatabaseError,
            asyncpg.PostgresError,
            asyncpg.InterfaceError,
            asyncio.TimeoutError,
            OSError,
        ) as e:
            error = classify_driver_error(e)
            api_error = to_api_error(error)
            logger.debug(
                f"{self.entity_name} {operation} failed",
                extra={"error": api_error.to_dict()}
            )
            raise api_error

    @abstractmethod
    async def find_by_id(self, entity_id: UUID) -> T:
        """Return the live entity with this id."""
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Insert the entity and return the stored row."""
        pass

    @abstractmethod
    async def update(self, entity_id: UUID, data: Dict[str, Any]) -> T:
        """Apply field changes to a live entity and return the stored row."""
        pass

    @abstractmethod
    async def soft_delete(self, entity_id: UUID) -> None:
        """Mark a live entity as deleted."""
        pass

    @abstractmethod
    async def list(self, params: PaginationParams) -> List[T]:
        """Return one page of live entities."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of live entities."""
        pass
