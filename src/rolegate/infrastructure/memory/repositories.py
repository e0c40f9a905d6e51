"""In-memory repository implementations."""

from rolegate.domain.entities import Guard, Permission, Role


def _key(name: str, guard_name: str) -> str:
    return f"{guard_name}:{name}"


class InMemoryPermissionRepository:
    """Permission repository keyed by guard and name."""

    def __init__(self) -> None:
        self._by_key: dict[str, Permission] = {}

    async def save(self, permission: Permission) -> None:
        self._by_key[_key(permission.name, permission.guard_name)] = permission

    async def find(self, name: str, guard_name: str = "web") -> Permission | None:
        return self._by_key.get(_key(name, guard_name))

    async def find_all(self, guard_name: str = "web") -> list[Permission]:
        return [p for p in self._by_key.values() if p.guard_name == guard_name]

    async def delete(self, name: str, guard_name: str = "web") -> None:
        self._by_key.pop(_key(name, guard_name), None)


class InMemoryRoleRepository:
    """Role repository keyed by guard and name."""

    def __init__(self) -> None:
        self._by_key: dict[str, Role] = {}

    async def save(self, role: Role) -> None:
        self._by_key[_key(role.name, role.guard_name)] = role

    async def find(self, name: str, guard_name: str = "web") -> Role | None:
        return self._by_key.get(_key(name, guard_name))

    async def find_all(self, guard_name: str = "web") -> list[Role]:
        return [r for r in self._by_key.values() if r.guard_name == guard_name]

    async def delete(self, name: str, guard_name: str = "web") -> None:
        self._by_key.pop(_key(name, guard_name), None)


class InMemoryGuardRepository:
    """Guard repository keyed by name."""

    def __init__(self) -> None:
        self._by_name: dict[str, Guard] = {}

    async def save(self, guard: Guard) -> None:
        self._by_name[guard.name] = guard

    async def find(self, name: str) -> Guard | None:
        return self._by_name.get(name)

    async def find_all(self) -> list[Guard]:
        return list(self._by_name.values())

    async def delete(self, name: str) -> None:
        self._by_name.pop(name, None)
