"""Organization SQL queries, parameterized by schema."""

ORGANIZATION_COLUMNS = "id, name, description, is_active, created_at, updated_at, deleted_at"

ORGANIZATION_INSERT = """
    INSERT INTO {schema}.organizations (
        id, name, description, is_active, created_at, updated_at
    ) VALUES (
        $1, $2, $3, $4, $5, $6
    ) RETURNING """ + ORGANIZATION_COLUMNS

ORGANIZATION_GET_BY_ID = """
    SELECT """ + ORGANIZATION_COLUMNS + """ FROM {schema}.organizations
    WHERE id = $1 AND deleted_at IS NULL
"""

ORGANIZATION_GET_BY_NAME = """
    SELECT """ + ORGANIZATION_COLUMNS + """ FROM {schema}.organizations
    WHERE name = $1 AND deleted_at IS NULL
"""

# {assignments} is built from a fixed column whitelist
ORGANIZATION_UPDATE = """
    UPDATE {schema}.organizations SET
        {assignments},
        updated_at = NOW()
    WHERE id = $1 AND deleted_at IS NULL
    RETURNING """ + ORGANIZATION_COLUMNS

ORGANIZATION_DELETE_SOFT = """
    UPDATE {schema}.organizations SET
        deleted_at = NOW(),
        is_active = false,
        updated_at = NOW()
    WHERE id = $1 AND deleted_at IS NULL
    RETURNING id
"""

ORGANIZATION_LIST = """
    SELECT """ + ORGANIZATION_COLUMNS + """ FROM {schema}.organizations
    WHERE deleted_at IS NULL
    ORDER BY {order_by}
    LIMIT $1 OFFSET $2
"""

ORGANIZATION_COUNT = """
    SELECT COUNT(*) FROM {schema}.organizations
    WHERE deleted_at IS NULL
"""
