"""PostgreSQL adapters (psycopg 3, async)."""

from rolegate.infrastructure.persistence.postgres.connection import create_pool, get_connection
from rolegate.infrastructure.persistence.postgres.guard_repository import (
    PostgresGuardRepository,
)
from rolegate.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from rolegate.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)

__all__ = [
    "PostgresGuardRepository",
    "PostgresPermissionRepository",
    "PostgresRoleRepository",
    "create_pool",
    "get_connection",
]
