"""Role entity - named bundle of permissions scoped to a guard."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from rolegate.domain.entities.identity import new_id, parse_timestamp, utc_now
from rolegate.domain.entities.permission import Permission
from rolegate.domain.exceptions import GuardMismatch
from rolegate.domain.value_objects import DEFAULT_GUARD


@dataclass(eq=False)
class Role:
    """Role - admin, moderator, ... holding its own copies of permissions.

    Every held permission carries the role's guard name. Equality is by
    id, name and guard name, like Permission.
    """

    name: str = ""
    guard_name: str = DEFAULT_GUARD
    id: str = field(default_factory=new_id)
    description: str | None = None
    permissions: list[Permission] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        self.permissions = self._accept_all(self.permissions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return (self.id, self.name, self.guard_name) == (
            other.id,
            other.name,
            other.guard_name,
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.guard_name))

    @staticmethod
    def _coerce(permission: Permission | dict[str, Any]) -> Permission:
        if isinstance(permission, dict):
            return Permission.from_json(permission)
        return permission

    def _accept(self, permission: Permission | dict[str, Any]) -> Permission:
        permission = self._coerce(permission)
        if permission.guard_name != self.guard_name:
            raise GuardMismatch(self.guard_name, permission.guard_name, permission.name)
        return permission.copy()

    def _accept_all(self, permissions: Iterable[Permission | dict[str, Any]]) -> list[Permission]:
        accepted: list[Permission] = []
        for permission in permissions:
            perm = self._accept(permission)
            if perm not in accepted:
                accepted.append(perm)
        return accepted

    def add_permission(self, permission: Permission | dict[str, Any]) -> None:
        """Add a copy of the permission unless an equal one is already held."""
        perm = self._accept(permission)
        if not self.has_permission(perm):
            self.permissions.append(perm)

    def remove_permission(self, permission: Permission | dict[str, Any]) -> None:
        permission = self._coerce(permission)
        self.permissions = [p for p in self.permissions if p != permission]

    def has_permission(self, permission: Permission | dict[str, Any]) -> bool:
        permission = self._coerce(permission)
        return any(p == permission for p in self.permissions)

    def sync_permissions(self, permissions: Iterable[Permission | dict[str, Any]]) -> None:
        """Replace the whole permission list (no merge)."""
        self.permissions = self._accept_all(permissions)

    def copy(self) -> "Role":
        return replace(self)

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "guard_name": self.guard_name,
            "description": self.description,
            "permissions": [p.to_json() for p in self.permissions],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Role":
        return cls(
            name=data.get("name") or "",
            guard_name=data.get("guard_name") or DEFAULT_GUARD,
            id=data.get("id") or new_id(),
            description=data.get("description"),
            permissions=list(data.get("permissions") or []),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )
