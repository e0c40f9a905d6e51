"""Guard repository port."""

from typing import Protocol

from rolegate.domain.entities import Guard


class GuardRepository(Protocol):
    """Port for guard persistence. Only the guard's existence is stored."""

    async def save(self, guard: Guard) -> None: ...

    async def find(self, name: str) -> Guard | None: ...

    async def find_all(self) -> list[Guard]: ...

    async def delete(self, name: str) -> None: ...
