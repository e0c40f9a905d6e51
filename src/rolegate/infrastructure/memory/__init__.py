"""In-memory adapters for tests, examples and single-process hosts."""

from rolegate.infrastructure.memory.cache import InMemoryCacheService
from rolegate.infrastructure.memory.events import InMemoryEventDispatcher
from rolegate.infrastructure.memory.repositories import (
    InMemoryGuardRepository,
    InMemoryPermissionRepository,
    InMemoryRoleRepository,
)

__all__ = [
    "InMemoryCacheService",
    "InMemoryEventDispatcher",
    "InMemoryGuardRepository",
    "InMemoryPermissionRepository",
    "InMemoryRoleRepository",
]
