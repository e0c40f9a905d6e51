"""PostgreSQL role repository implementation."""

from typing import Any

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from rolegate.domain.entities import Role
from rolegate.infrastructure.persistence.postgres.connection import get_connection
from rolegate.infrastructure.persistence.postgres.permission_repository import (
    row_to_permission,
)

ROLE_COLUMNS = "id, name, guard_name, description, created_at, updated_at"


class PostgresRoleRepository:
    """Role repository on ``roles`` and the ``role_permissions`` link table."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def _load(self, conn: AsyncConnection, r: tuple[Any, ...]) -> Role:
        cur = await conn.execute(
            "SELECT p.id, p.name, p.guard_name, p.description, p.created_at, p.updated_at "
            "FROM permissions p JOIN role_permissions rp ON p.id = rp.permission_id "
            "WHERE rp.role_id = %s",
            (r[0],),
        )
        permissions = [row_to_permission(p) for p in await cur.fetchall()]
        return Role(
            id=r[0],
            name=r[1],
            guard_name=r[2],
            description=r[3],
            permissions=permissions,
            created_at=r[4],
            updated_at=r[5],
        )

    async def save(self, role: Role) -> None:
        """Upsert the role row and rewrite its permission links.

        Links are keyed on the id stored in ``roles``, which differs from
        ``role.id`` when a same-named role was saved before.
        """
        async with get_connection(self._pool) as conn:
            async with conn.transaction():
                cur = await conn.execute(
                    f"INSERT INTO roles ({ROLE_COLUMNS}) "
                    "VALUES (%s, %s, %s, %s, %s, %s) "
                    "ON CONFLICT (name, guard_name) "
                    "DO UPDATE SET description = EXCLUDED.description, updated_at = EXCLUDED.updated_at "
                    "RETURNING id",
                    (
                        role.id,
                        role.name,
                        role.guard_name,
                        role.description,
                        role.created_at,
                        role.updated_at,
                    ),
                )
                (role_id,) = await cur.fetchone()
                await conn.execute(
                    "DELETE FROM role_permissions WHERE role_id = %s",
                    (role_id,),
                )
                for permission in role.permissions:
                    await conn.execute(
                        "INSERT INTO role_permissions (role_id, permission_id) VALUES (%s, %s)",
                        (role_id, permission.id),
                    )

    async def find(self, name: str, guard_name: str = "web") -> Role | None:
        async with get_connection(self._pool) as conn:
            cur = await conn.execute(
                f"SELECT {ROLE_COLUMNS} FROM roles WHERE name = %s AND guard_name = %s",
                (name, guard_name),
            )
            r = await cur.fetchone()
            if not r:
                return None
            return await self._load(conn, r)

    async def find_all(self, guard_name: str = "web") -> list[Role]:
        async with get_connection(self._pool) as conn:
            cur = await conn.execute(
                f"SELECT {ROLE_COLUMNS} FROM roles WHERE guard_name = %s",
                (guard_name,),
            )
            rows = await cur.fetchall()
            return [await self._load(conn, r) for r in rows]

    async def delete(self, name: str, guard_name: str = "web") -> None:
        async with get_connection(self._pool) as conn:
            await conn.execute(
                "DELETE FROM roles WHERE name = %s AND guard_name = %s",
                (name, guard_name),
            )
