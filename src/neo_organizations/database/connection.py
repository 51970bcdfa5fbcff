"""
Database connection management using asyncpg.

One ``DatabaseManager`` per process owns the connection pool. Connections are
checked out per request through ``acquire()``, which releases them on every
exit path.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg
from asyncpg import Connection, Pool

from ..config.settings import Settings, get_settings
from ..core.exceptions import (
    PoolError,
    classify_driver_error,
    to_api_error,
)

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the asyncpg connection pool."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize DatabaseManager.

        Args:
            settings: Application settings (defaults to the cached settings)
        """
        self.settings = settings or get_settings()
        self.pool: Optional[Pool] = None
        self.dsn = self.settings.dsn
        self.acquire_timeout = self.settings.db_pool_timeout
        self.pool_config = self.settings.get_pool_config()
        self._lock = asyncio.Lock()

    async def create_pool(self) -> Pool:
        """Create and return the connection pool."""
        if self.pool is not None:
            return self.pool

        async with self._lock:
            if self.pool is None:
                logger.info(f"Creating database pool with size {self.pool_config['max_size']}")
                self.pool = await asyncpg.create_pool(
                    self.dsn,
                    server_settings={"application_name": self.settings.app_name},
                    **self.pool_config
                )
                logger.info("Database pool created successfully")
        return self.pool

    async def close_pool(self) -> None:
        """Close the connection pool."""
        if self.pool is not None:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[Connection]:
        """Check out a connection from the pool.

        Raises:
            ApiError: with ``ConnectionPoolError`` code when the pool cannot be
                created or no connection frees up within ``acquire_timeout``
        """
        try:
            pool = await self.create_pool()
            connection = await pool.acquire(timeout=self.acquire_timeout)
        except asyncio.TimeoutError as e:
            error = PoolError(f"no connection available within {self.acquire_timeout}s")
            error.__cause__ = e
            logger.warning(str(error))
            raise to_api_error(error)
        except asyncpg.exceptions.InterfaceError as e:
            # raised by a closing or closed pool
            error = PoolError(str(e))
            error.__cause__ = e
            raise to_api_error(error)
        except (asyncpg.PostgresError, OSError) as e:
            error = classify_driver_error(e)
            logger.error(f"Failed to acquire database connection: {error}")
            raise to_api_error(error)

        try:
            yield connection
        finally:
            await pool.release(connection)

    async def health_check(self) -> bool:
        """Check database health."""
        try:
            async with self.acquire() as connection:
                result = await connection.fetchval("SELECT 1")
                return result == 1
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False


# Global instance
_database_manager: Optional[DatabaseManager] = None


def get_database() -> DatabaseManager:
    """Get the global database manager instance."""
    global _database_manager
    if _database_manager is None:
        _database_manager = DatabaseManager()
    return _database_manager


def set_database(manager: Optional[DatabaseManager]) -> None:
    """Replace the global database manager (used by the app factory and tests)."""
    global _database_manager
    _database_manager = manager


async def init_database() -> DatabaseManager:
    """Initialize the database pool."""
    logger.info("Initializing database connections...")
    db = get_database()
    await db.create_pool()
    logger.info("Database initialization complete")
    return db


async def close_database() -> None:
    """Close the database pool."""
    logger.info("Closing database connections...")
    if _database_manager is not None:
        await _database_manager.close_pool()
