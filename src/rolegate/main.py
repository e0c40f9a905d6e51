"""Composition root - build a permission manager from settings."""

from psycopg_pool import AsyncConnectionPool

from rolegate import __version__
from rolegate.application.dto import ManagerDependencies
from rolegate.application.permission_manager import PermissionManager
from rolegate.config import Settings, get_settings
from rolegate.infrastructure.memory import (
    InMemoryCacheService,
    InMemoryEventDispatcher,
    InMemoryGuardRepository,
    InMemoryPermissionRepository,
    InMemoryRoleRepository,
)
from rolegate.infrastructure.persistence.postgres import (
    PostgresGuardRepository,
    PostgresPermissionRepository,
    PostgresRoleRepository,
    create_pool,
)
from rolegate.logging import setup_logging


def main() -> None:
    """CLI entry point."""
    print(f"rolegate v{__version__}")


def create_pool_from_settings(settings: Settings) -> AsyncConnectionPool | None:
    """Pool for ``settings.database_url``, or None when no database is configured."""
    if not settings.database_url:
        return None
    return create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )


def create_dependencies(
    settings: Settings, pool: AsyncConnectionPool | None = None
) -> ManagerDependencies:
    """PostgreSQL repositories when a pool is given, in-memory ones otherwise."""
    if pool is not None:
        permission_repository = PostgresPermissionRepository(pool)
        role_repository = PostgresRoleRepository(pool)
        guard_repository = PostgresGuardRepository(pool)
    else:
        permission_repository = InMemoryPermissionRepository()
        role_repository = InMemoryRoleRepository()
        guard_repository = InMemoryGuardRepository()
    return ManagerDependencies(
        permission_repository=permission_repository,
        role_repository=role_repository,
        guard_repository=guard_repository,
        cache_service=InMemoryCacheService(default_ttl=settings.cache_ttl),
        event_dispatcher=InMemoryEventDispatcher(),
    )


def create_permission_manager(
    settings: Settings | None = None,
    pool: AsyncConnectionPool | None = None,
    configure_logging: bool = False,
) -> PermissionManager:
    """Build a PermissionManager with all collaborators wired."""
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_json)
    return PermissionManager(
        settings.manager_config(),
        create_dependencies(settings, pool),
    )
