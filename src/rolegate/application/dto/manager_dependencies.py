"""Collaborators injected into the permission manager."""

from dataclasses import dataclass

from rolegate.application.ports import (
    CacheService,
    EventDispatcher,
    GuardRepository,
    PermissionRepository,
    RoleRepository,
)


@dataclass
class ManagerDependencies:
    """Optional collaborators. A missing one turns its forwarding call into a no-op."""

    permission_repository: PermissionRepository | None = None
    role_repository: RoleRepository | None = None
    guard_repository: GuardRepository | None = None
    cache_service: CacheService | None = None
    event_dispatcher: EventDispatcher | None = None
