"""Role repository port."""

from typing import Protocol

from rolegate.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence. Roles are stored with their permission links."""

    async def save(self, role: Role) -> None: ...

    async def find(self, name: str, guard_name: str = "web") -> Role | None: ...

    async def find_all(self, guard_name: str = "web") -> list[Role]: ...

    async def delete(self, name: str, guard_name: str = "web") -> None: ...
