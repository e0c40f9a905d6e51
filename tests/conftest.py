"""Pytest fixtures for rolegate tests."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from rolegate.application.dto import ManagerConfig, ManagerDependencies
from rolegate.application.permission_manager import PermissionManager
from rolegate.domain.entities import Permission, Role
from rolegate.domain.mixins import Authorizable


# --- Subjects ---


@dataclass
class User(Authorizable):
    """Host user model using both capability mixins."""

    id: str
    name: str = ""
    roles: list[Role] = field(default_factory=list)
    permissions: list[Permission] = field(default_factory=list)


# --- Fake PostgreSQL pool ---


class FakeCursor:
    """Cursor returning preset rows."""

    def __init__(self, rows: list[tuple[Any, ...]]) -> None:
        self._rows = rows

    async def fetchone(self) -> tuple[Any, ...] | None:
        return self._rows[0] if self._rows else None

    async def fetchall(self) -> list[tuple[Any, ...]]:
        return list(self._rows)


class FakeConnection:
    """Records executed statements; each execute consumes one preset result."""

    def __init__(self, results: list[list[tuple[Any, ...]]] | None = None) -> None:
        self.executed: list[tuple[str, tuple[Any, ...] | None]] = []
        self._results = list(results or [])
        self.transactions = 0

    async def execute(self, query: str, params: tuple[Any, ...] | None = None) -> FakeCursor:
        self.executed.append((query, params))
        rows = self._results.pop(0) if self._results else []
        return FakeCursor(rows)

    @asynccontextmanager
    async def transaction(self):
        self.transactions += 1
        yield


class FakePool:
    """Stands in for psycopg_pool.AsyncConnectionPool."""

    def __init__(self, conn: FakeConnection | None = None) -> None:
        self.conn = conn or FakeConnection()

    @asynccontextmanager
    async def connection(self):
        yield self.conn


# --- Fixtures ---


@pytest.fixture
def user() -> User:
    return User(id="user-1", name="Ada")


@pytest.fixture
def manager() -> PermissionManager:
    """Manager with default config and no collaborators."""
    return PermissionManager()


@pytest.fixture
def mock_dependencies() -> ManagerDependencies:
    """AsyncMock collaborators for every port."""
    dispatcher = AsyncMock()
    dispatcher.subscribe = MagicMock()
    dispatcher.unsubscribe = MagicMock()
    return ManagerDependencies(
        permission_repository=AsyncMock(),
        role_repository=AsyncMock(),
        guard_repository=AsyncMock(),
        cache_service=AsyncMock(),
        event_dispatcher=dispatcher,
    )


@pytest.fixture
def wired_manager(mock_dependencies: ManagerDependencies) -> PermissionManager:
    """Manager with caching enabled and mocked collaborators."""
    return PermissionManager(ManagerConfig(cache_enabled=True), mock_dependencies)


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()
