"""Tests for the connection pool manager."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import asyncpg
import pytest

from neo_organizations.config.settings import Settings
from neo_organizations.core.exceptions import ApiError, ErrorCode, PoolError
from neo_organizations.database.connection import DatabaseManager


@pytest.fixture
def manager():
    settings = Settings(_env_file=None, db_pool_timeout=0.5)
    return DatabaseManager(settings)


@pytest.fixture
def mock_pool():
    pool = MagicMock()
    pool.acquire = AsyncMock()
    pool.release = AsyncMock()
    pool.close = AsyncMock()
    return pool


class TestDatabaseManager:
    """Test pool lifecycle and connection checkout."""

    @pytest.mark.asyncio
    async def test_create_pool_uses_settings(self, manager, mock_pool):
        with patch(
            "neo_organizations.database.connection.asyncpg.create_pool",
            new=AsyncMock(return_value=mock_pool)
        ) as create_pool:
            pool = await manager.create_pool()
            again = await manager.create_pool()

        assert pool is mock_pool
        assert again is mock_pool
        create_pool.assert_awaited_once()
        kwargs = create_pool.call_args.kwargs
        assert kwargs["max_size"] == 10
        assert kwargs["server_settings"] == {"application_name": "NeoOrganizationsApi"}

    @pytest.mark.asyncio
    async def test_acquire_releases_connection(self, manager, mock_pool):
        connection = AsyncMock()
        mock_pool.acquire.return_value = connection
        manager.pool = mock_pool

        async with manager.acquire() as conn:
            assert conn is connection

        mock_pool.acquire.assert_awaited_once_with(timeout=0.5)
        mock_pool.release.assert_awaited_once_with(connection)

    @pytest.mark.asyncio
    async def test_acquire_releases_connection_on_error(self, manager, mock_pool):
        connection = AsyncMock()
        mock_pool.acquire.return_value = connection
        manager.pool = mock_pool

        with pytest.raises(RuntimeError):
            async with manager.acquire():
                raise RuntimeError("handler failed")

        mock_pool.release.assert_awaited_once_with(connection)

    @pytest.mark.asyncio
    async def test_acquire_timeout_is_pool_error(self, manager, mock_pool):
        mock_pool.acquire.side_effect = asyncio.TimeoutError()
        manager.pool = mock_pool

        with pytest.raises(ApiError) as exc_info:
            async with manager.acquire():
                pass

        assert exc_info.value.code == ErrorCode.CONNECTION_POOL_ERROR
        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.source, PoolError)
        mock_pool.release.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_closed_pool_is_pool_error(self, manager, mock_pool):
        mock_pool.acquire.side_effect = asyncpg.exceptions.InterfaceError("pool is closed")
        manager.pool = mock_pool

        with pytest.raises(ApiError) as exc_info:
            async with manager.acquire():
                pass

        assert exc_info.value.code == ErrorCode.CONNECTION_POOL_ERROR

    @pytest.mark.asyncio
    async def test_unreachable_database_is_pool_error(self, manager):
        with patch(
            "neo_organizations.database.connection.asyncpg.create_pool",
            new=AsyncMock(side_effect=ConnectionRefusedError("refused"))
        ):
            with pytest.raises(ApiError) as exc_info:
                async with manager.acquire():
                    pass

        assert exc_info.value.code == ErrorCode.CONNECTION_POOL_ERROR
        assert "refused" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_health_check(self, manager, mock_pool):
        connection = AsyncMock()
        connection.fetchval.return_value = 1
        mock_pool.acquire.return_value = connection
        manager.pool = mock_pool

        assert await manager.health_check() is True

        mock_pool.acquire.side_effect = asyncio.TimeoutError()
        assert await manager.health_check() is False

    @pytest.mark.asyncio
    async def test_close_pool(self, manager, mock_pool):
        manager.pool = mock_pool

        await manager.close_pool()

        mock_pool.close.assert_awaited_once()
        assert manager.pool is None
