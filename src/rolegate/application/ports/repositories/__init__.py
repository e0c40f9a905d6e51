"""Repository ports."""

from rolegate.application.ports.repositories.guard_repository import GuardRepository
from rolegate.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from rolegate.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "GuardRepository",
    "PermissionRepository",
    "RoleRepository",
]
