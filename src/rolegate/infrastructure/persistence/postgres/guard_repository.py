"""PostgreSQL guard repository implementation."""

from psycopg_pool import AsyncConnectionPool

from rolegate.domain.entities import Guard
from rolegate.infrastructure.persistence.postgres.connection import get_connection


class PostgresGuardRepository:
    """Guard repository on the ``guards`` table. Stores names only."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def save(self, guard: Guard) -> None:
        async with get_connection(self._pool) as conn:
            await conn.execute(
                "INSERT INTO guards (name) VALUES (%s) ON CONFLICT (name) DO NOTHING",
                (guard.name,),
            )

    async def find(self, name: str) -> Guard | None:
        async with get_connection(self._pool) as conn:
            cur = await conn.execute("SELECT name FROM guards WHERE name = %s", (name,))
            r = await cur.fetchone()
        if not r:
            return None
        return Guard(name=r[0])

    async def find_all(self) -> list[Guard]:
        async with get_connection(self._pool) as conn:
            cur = await conn.execute("SELECT name FROM guards ORDER BY name")
            rows = await cur.fetchall()
        return [Guard(name=r[0]) for r in rows]

    async def delete(self, name: str) -> None:
        async with get_connection(self._pool) as conn:
            await conn.execute("DELETE FROM guards WHERE name = %s", (name,))
