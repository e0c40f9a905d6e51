"""Unit tests for settings, logging setup and the composition root."""

import pytest
from loguru import logger

from rolegate.config import Settings
from rolegate.infrastructure.memory import InMemoryCacheService, InMemoryPermissionRepository
from rolegate.infrastructure.persistence.postgres import (
    PostgresGuardRepository,
    PostgresPermissionRepository,
    PostgresRoleRepository,
)
from rolegate.logging import setup_logging
from rolegate.main import create_permission_manager, create_pool_from_settings, main

from tests.conftest import FakePool


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ROLEGATE_DEFAULT_GUARD", raising=False)
    settings = Settings(_env_file=None)
    assert settings.default_guard == "web"
    assert settings.cache_enabled is False
    assert settings.cache_ttl == 3600
    assert settings.database_url is None


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROLEGATE_DEFAULT_GUARD", "api")
    monkeypatch.setenv("ROLEGATE_CACHE_ENABLED", "true")
    monkeypatch.setenv("ROLEGATE_CACHE_TTL", "60")
    config = Settings(_env_file=None).manager_config()
    assert config.default_guard == "api"
    assert config.cache_enabled is True
    assert config.cache_ttl == 60


def test_manager_with_in_memory_collaborators() -> None:
    manager = create_permission_manager(Settings(_env_file=None, default_guard="api"))
    assert manager.get_default_guard().name == "api"
    assert isinstance(manager.dependencies.permission_repository, InMemoryPermissionRepository)
    assert isinstance(manager.dependencies.cache_service, InMemoryCacheService)


def test_manager_with_postgres_repositories() -> None:
    manager = create_permission_manager(Settings(_env_file=None), pool=FakePool())
    deps = manager.dependencies
    assert isinstance(deps.permission_repository, PostgresPermissionRepository)
    assert isinstance(deps.role_repository, PostgresRoleRepository)
    assert isinstance(deps.guard_repository, PostgresGuardRepository)


def test_no_pool_without_database_url() -> None:
    assert create_pool_from_settings(Settings(_env_file=None, database_url=None)) is None


@pytest.mark.asyncio
async def test_manager_round_trip_through_repository() -> None:
    manager = create_permission_manager(Settings(_env_file=None))
    perm = manager.create_permission("edit")
    await manager.save_permission_to_repository(perm)
    assert await manager.dependencies.permission_repository.find("edit") is perm


def test_setup_logging_emits_records(capsys: pytest.CaptureFixture[str]) -> None:
    handler_id = setup_logging("DEBUG")
    try:
        create_permission_manager(Settings(_env_file=None)).create_permission("edit-users")
    finally:
        logger.remove(handler_id)
        logger.disable("rolegate")
    assert "Created permission edit-users in guard web" in capsys.readouterr().err


def test_main_prints_version(capsys: pytest.CaptureFixture[str]) -> None:
    main()
    assert capsys.readouterr().out.startswith("rolegate v")
