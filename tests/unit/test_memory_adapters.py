"""Unit tests for in-memory adapters."""

import pytest

from rolegate.domain.entities import Guard, Permission, Role
from rolegate.infrastructure.memory import (
    InMemoryCacheService,
    InMemoryEventDispatcher,
    InMemoryGuardRepository,
    InMemoryPermissionRepository,
    InMemoryRoleRepository,
)


class TestPermissionRepository:
    """InMemoryPermissionRepository keyed by guard and name."""

    @pytest.mark.asyncio
    async def test_save_and_find(self) -> None:
        repo = InMemoryPermissionRepository()
        perm = Permission(name="edit", guard_name="api")
        await repo.save(perm)
        assert await repo.find("edit", "api") is perm
        assert await repo.find("edit") is None

    @pytest.mark.asyncio
    async def test_find_all_filters_guard(self) -> None:
        repo = InMemoryPermissionRepository()
        await repo.save(Permission(name="a"))
        await repo.save(Permission(name="b"))
        await repo.save(Permission(name="c", guard_name="api"))
        assert sorted(p.name for p in await repo.find_all()) == ["a", "b"]
        assert [p.name for p in await repo.find_all("api")] == ["c"]

    @pytest.mark.asyncio
    async def test_save_same_key_replaces(self) -> None:
        repo = InMemoryPermissionRepository()
        await repo.save(Permission(name="a", description="old"))
        await repo.save(Permission(name="a", description="new"))
        found = await repo.find("a")
        assert found.description == "new"
        assert len(await repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_delete(self) -> None:
        repo = InMemoryPermissionRepository()
        await repo.save(Permission(name="a"))
        await repo.delete("a")
        await repo.delete("a")
        assert await repo.find("a") is None


@pytest.mark.asyncio
async def test_role_repository() -> None:
    repo = InMemoryRoleRepository()
    role = Role(name="admin", permissions=[Permission(name="edit")])
    await repo.save(role)
    assert await repo.find("admin") is role
    assert await repo.find_all("api") == []
    await repo.delete("admin")
    assert await repo.find_all() == []


@pytest.mark.asyncio
async def test_guard_repository() -> None:
    repo = InMemoryGuardRepository()
    await repo.save(Guard("web"))
    await repo.save(Guard("api"))
    assert (await repo.find("api")).name == "api"
    assert {g.name for g in await repo.find_all()} == {"web", "api"}
    await repo.delete("api")
    assert await repo.find("api") is None


class TestCacheService:
    """InMemoryCacheService with expiry on read."""

    @pytest.mark.asyncio
    async def test_set_get_delete(self) -> None:
        cache = InMemoryCacheService()
        await cache.set("k", {"v": 1})
        assert await cache.get("k") == {"v": 1}
        await cache.delete("k")
        assert await cache.get("k") is None

    @pytest.mark.asyncio
    async def test_expired_entry_dropped(self) -> None:
        now = [1000.0]
        cache = InMemoryCacheService(default_ttl=60, clock=lambda: now[0])
        await cache.set("short", "a", ttl=10)
        await cache.set("default", "b")

        now[0] += 30
        assert await cache.get("short") is None
        assert await cache.get("default") == "b"

        now[0] += 31
        assert await cache.get("default") is None

    @pytest.mark.asyncio
    async def test_clear(self) -> None:
        cache = InMemoryCacheService()
        await cache.set("a", 1)
        await cache.set("b", 2)
        await cache.clear()
        assert await cache.get("a") is None
        assert await cache.get("b") is None


class TestEventDispatcher:
    """InMemoryEventDispatcher."""

    @pytest.mark.asyncio
    async def test_handlers_called_in_order(self) -> None:
        dispatcher = InMemoryEventDispatcher()
        calls: list[tuple[str, object]] = []
        dispatcher.subscribe("role.assigned", lambda data: calls.append(("first", data)))
        dispatcher.subscribe("role.assigned", lambda data: calls.append(("second", data)))
        await dispatcher.dispatch("role.assigned", 42)
        assert calls == [("first", 42), ("second", 42)]

    @pytest.mark.asyncio
    async def test_unsubscribe(self) -> None:
        dispatcher = InMemoryEventDispatcher()
        calls: list[object] = []
        handler = calls.append
        dispatcher.subscribe("e", handler)
        dispatcher.unsubscribe("e", handler)
        dispatcher.unsubscribe("e", handler)
        await dispatcher.dispatch("e", 1)
        assert calls == []

    @pytest.mark.asyncio
    async def test_dispatch_without_handlers(self) -> None:
        await InMemoryEventDispatcher().dispatch("nobody-listens", None)
