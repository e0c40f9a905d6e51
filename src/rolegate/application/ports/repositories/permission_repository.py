"""Permission repository port."""

from typing import Protocol

from rolegate.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for permission persistence, keyed by name and guard."""

    async def save(self, permission: Permission) -> None: ...

    async def find(self, name: str, guard_name: str = "web") -> Permission | None: ...

    async def find_all(self, guard_name: str = "web") -> list[Permission]: ...

    async def delete(self, name: str, guard_name: str = "web") -> None: ...
