"""PostgreSQL async connection pool."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from loguru import logger
from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 5) -> AsyncConnectionPool:
    """Create async connection pool for the rolegate repositories.

    Pool is created with open=False. Caller must ``await pool.open()`` before
    the first repository call and ``await pool.close()`` on shutdown.
    """
    logger.debug("Creating PostgreSQL pool (min={}, max={})", min_size, max_size)
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


@asynccontextmanager
async def get_connection(pool: AsyncConnectionPool) -> AsyncIterator[AsyncConnection]:
    """Borrow a connection; the transaction commits when the block exits cleanly."""
    async with pool.connection() as conn:
        yield conn
