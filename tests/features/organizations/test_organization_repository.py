"""Tests for the asyncpg-backed organization repository."""

import asyncpg
import pytest

from neo_organizations.core.exceptions import ApiError, ErrorCode
from neo_organizations.features.organizations.repositories import OrganizationRepository
from neo_organizations.models.pagination import PaginationParams

from tests.helpers import make_organization, make_row


class TestOrganizationRepository:
    """Test organization repository operations."""

    @pytest.fixture
    def repository(self, mock_connection):
        return OrganizationRepository(mock_connection, schema="admin")

    @pytest.mark.asyncio
    async def test_find_by_id(self, repository, mock_connection, sample_organization):
        mock_connection.fetchrow.return_value = make_row(sample_organization)

        result = await repository.find_by_id(sample_organization.id)

        assert result == sample_organization
        query, org_id = mock_connection.fetchrow.call_args[0]
        assert "FROM admin.organizations" in query
        assert "deleted_at IS NULL" in query
        assert org_id == sample_organization.id

    @pytest.mark.asyncio
    async def test_find_by_id_missing_is_not_found(self, repository, mock_connection, sample_organization):
        mock_connection.fetchrow.return_value = None

        with pytest.raises(ApiError) as exc_info:
            await repository.find_by_id(sample_organization.id)

        assert exc_info.value.code == ErrorCode.NOT_FOUND
        assert exc_info.value.message == f"Organization {sample_organization.id} not found"

    @pytest.mark.asyncio
    async def test_find_by_name_returns_none(self, repository, mock_connection):
        mock_connection.fetchrow.return_value = None

        assert await repository.find_by_name("Nobody") is None

    @pytest.mark.asyncio
    async def test_create(self, repository, mock_connection, sample_organization):
        mock_connection.fetchrow.return_value = make_row(sample_organization)

        result = await repository.create(sample_organization)

        assert result.id == sample_organization.id
        args = mock_connection.fetchrow.call_args[0]
        assert "INSERT INTO admin.organizations" in args[0]
        assert args[1:4] == (sample_organization.id, "Acme Corp", "Rockets and anvils")

    @pytest.mark.asyncio
    async def test_create_unique_violation_is_conflict(self, repository, mock_connection, sample_organization):
        mock_connection.fetchrow.side_effect = asyncpg.exceptions.UniqueViolationError(
            'duplicate key value violates unique constraint "organizations_name_live_key"'
        )

        with pytest.raises(ApiError) as exc_info:
            await repository.create(sample_organization)

        error = exc_info.value
        assert error.code == ErrorCode.CONFLICT
        assert error.status_code == 409
        assert error.message == "Organization with name 'Acme Corp' already exists"
        assert "organizations_name_live_key" not in error.message

    @pytest.mark.asyncio
    async def test_update_builds_assignments_from_whitelist(self, repository, mock_connection, sample_organization):
        mock_connection.fetchrow.return_value = make_row(sample_organization)

        await repository.update(
            sample_organization.id,
            {"name": "Acme Inc", "is_active": False, "id": "ignored"}
        )

        args = mock_connection.fetchrow.call_args[0]
        assert "UPDATE admin.organizations SET" in args[0]
        assert "name = $2" in args[0]
        assert "is_active = $3" in args[0]
        assert "id = $4" not in args[0]
        assert args[1:] == (sample_organization.id, "Acme Inc", False)

    @pytest.mark.asyncio
    async def test_update_without_changes_reads_current(self, repository, mock_connection, sample_organization):
        mock_connection.fetchrow.return_value = make_row(sample_organization)

        result = await repository.update(sample_organization.id, {})

        assert result == sample_organization
        assert "SELECT" in mock_connection.fetchrow.call_args[0][0]

    @pytest.mark.asyncio
    async def test_update_missing_is_not_found(self, repository, mock_connection, sample_organization):
        mock_connection.fetchrow.return_value = None

        with pytest.raises(ApiError) as exc_info:
            await repository.update(sample_organization.id, {"description": "x"})

        assert exc_info.value.code == ErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_soft_delete(self, repository, mock_connection, sample_organization):
        mock_connection.fetchval.return_value = sample_organization.id

        await repository.soft_delete(sample_organization.id)

        query = mock_connection.fetchval.call_args[0][0]
        assert "deleted_at = NOW()" in query
        assert "is_active = false" in query

    @pytest.mark.asyncio
    async def test_soft_delete_missing_is_not_found(self, repository, mock_connection, sample_organization):
        mock_connection.fetchval.return_value = None

        with pytest.raises(ApiError) as exc_info:
            await repository.soft_delete(sample_organization.id)

        assert exc_info.value.code == ErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_list_uses_limit_offset_and_insertion_order(self, repository, mock_connection):
        orgs = [make_organization(name=f"Org {i}") for i in range(3)]
        mock_connection.fetch.return_value = [make_row(org) for org in orgs]

        result = await repository.list(PaginationParams(page=2, per_page=3))

        assert [org.name for org in result] == ["Org 0", "Org 1", "Org 2"]
        query, limit, offset = mock_connection.fetch.call_args[0]
        assert "ORDER BY created_at ASC, id ASC" in query
        assert (limit, offset) == (3, 3)

    @pytest.mark.asyncio
    async def test_count(self, repository, mock_connection):
        mock_connection.fetchval.return_value = 7

        assert await repository.count() == 7

    @pytest.mark.asyncio
    async def test_connection_loss_is_connection_pool_error(self, repository, mock_connection):
        mock_connection.fetchval.side_effect = asyncpg.exceptions.ConnectionDoesNotExistError(
            "connection was closed in the middle of operation"
        )

        with pytest.raises(ApiError) as exc_info:
            await repository.count()

        assert exc_info.value.code == ErrorCode.CONNECTION_POOL_ERROR
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_query_failure_is_database_error(self, repository, mock_connection):
        mock_connection.fetch.side_effect = asyncpg.exceptions.UndefinedTableError(
            'relation "admin.organizations" does not exist'
        )

        with pytest.raises(ApiError) as exc_info:
            await repository.list(PaginationParams())

        error = exc_info.value
        assert error.code == ErrorCode.DATABASE_ERROR
        assert error.message == "Database operation failed"
        assert error.details == {"error_type": "QueryFailedError"}

    def test_custom_schema(self, mock_connection):
        repository = OrganizationRepository(mock_connection, schema="tenant_data")

        assert repository._query("SELECT 1 FROM {schema}.organizations") == "SELECT 1 FROM tenant_data.organizations"
