"""PostgreSQL permission repository implementation."""

from typing import Any

from psycopg_pool import AsyncConnectionPool

from rolegate.domain.entities import Permission
from rolegate.infrastructure.persistence.postgres.connection import get_connection

PERMISSION_COLUMNS = "id, name, guard_name, description, created_at, updated_at"


def row_to_permission(r: tuple[Any, ...]) -> Permission:
    return Permission(
        id=r[0],
        name=r[1],
        guard_name=r[2],
        description=r[3],
        created_at=r[4],
        updated_at=r[5],
    )


class PostgresPermissionRepository:
    """Permission repository on the ``permissions`` table."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def save(self, permission: Permission) -> None:
        """Insert permission, or update description on (name, guard_name) clash."""
        async with get_connection(self._pool) as conn:
            await conn.execute(
                f"INSERT INTO permissions ({PERMISSION_COLUMNS}) "
                "VALUES (%s, %s, %s, %s, %s, %s) "
                "ON CONFLICT (name, guard_name) "
                "DO UPDATE SET description = EXCLUDED.description, updated_at = EXCLUDED.updated_at",
                (
                    permission.id,
                    permission.name,
                    permission.guard_name,
                    permission.description,
                    permission.created_at,
                    permission.updated_at,
                ),
            )

    async def find(self, name: str, guard_name: str = "web") -> Permission | None:
        async with get_connection(self._pool) as conn:
            cur = await conn.execute(
                f"SELECT {PERMISSION_COLUMNS} FROM permissions WHERE name = %s AND guard_name = %s",
                (name, guard_name),
            )
            r = await cur.fetchone()
        if not r:
            return None
        return row_to_permission(r)

    async def find_all(self, guard_name: str = "web") -> list[Permission]:
        async with get_connection(self._pool) as conn:
            cur = await conn.execute(
                f"SELECT {PERMISSION_COLUMNS} FROM permissions WHERE guard_name = %s",
                (guard_name,),
            )
            rows = await cur.fetchall()
        return [row_to_permission(r) for r in rows]

    async def delete(self, name: str, guard_name: str = "web") -> None:
        async with get_connection(self._pool) as conn:
            await conn.execute(
                "DELETE FROM permissions WHERE name = %s AND guard_name = %s",
                (name, guard_name),
            )
