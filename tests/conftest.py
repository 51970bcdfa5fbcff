"""Pytest configuration and fixtures for neo-organizations tests."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from neo_organizations.app import create_app
from neo_organizations.config.settings import Settings
from neo_organizations.features.organizations.routers import get_organization_repository

from tests.helpers import InMemoryOrganizationRepository, make_organization


@pytest.fixture
def settings():
    """Settings isolated from the environment's .env file."""
    return Settings(_env_file=None, max_page_size=50, debug=False)


@pytest.fixture
def mock_connection():
    """Mock asyncpg connection."""
    conn = AsyncMock()
    conn.fetchrow = AsyncMock()
    conn.fetch = AsyncMock()
    conn.fetchval = AsyncMock()
    conn.execute = AsyncMock()
    return conn


@pytest.fixture
def organization_repository():
    return InMemoryOrganizationRepository()


@pytest.fixture
def sample_organization():
    return make_organization(name="Acme Corp", description="Rockets and anvils")


@pytest.fixture
def app(settings, organization_repository):
    """Application with the database replaced by the in-memory repository."""
    application = create_app(settings)
    application.dependency_overrides[get_organization_repository] = lambda: organization_repository
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    """HTTP client driving the ASGI app in-process."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
