"""Guard entity - named partition of permissions and roles."""

from dataclasses import dataclass, field
from typing import Any

from rolegate.domain.entities.permission import Permission
from rolegate.domain.entities.role import Role
from rolegate.domain.exceptions import GuardMismatch


@dataclass
class Guard:
    """Guard - canonical registry of the permissions and roles of one context.

    Entities are kept by reference; lookups by name return the first match.
    """

    name: str
    permissions: list[Permission] = field(default_factory=list)
    roles: list[Role] = field(default_factory=list)

    def _check_guard(self, entity: Permission | Role) -> None:
        if entity.guard_name != self.name:
            raise GuardMismatch(self.name, entity.guard_name, entity.name)

    def add_permission(self, permission: Permission) -> None:
        self._check_guard(permission)
        if not self.has_permission(permission):
            self.permissions.append(permission)

    def remove_permission(self, permission: Permission) -> None:
        self.permissions = [p for p in self.permissions if p != permission]

    def has_permission(self, permission: Permission) -> bool:
        return any(p == permission for p in self.permissions)

    def get_permission(self, name: str) -> Permission | None:
        return next((p for p in self.permissions if p.name == name), None)

    def add_role(self, role: Role) -> None:
        self._check_guard(role)
        if not self.has_role(role):
            self.roles.append(role)

    def remove_role(self, role: Role) -> None:
        self.roles = [r for r in self.roles if r != role]

    def has_role(self, role: Role) -> bool:
        return any(r == role for r in self.roles)

    def get_role(self, name: str) -> Role | None:
        return next((r for r in self.roles if r.name == name), None)

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "permissions": [p.to_json() for p in self.permissions],
            "roles": [r.to_json() for r in self.roles],
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Guard":
        guard = cls(name=data["name"])
        for item in data.get("permissions") or []:
            guard.add_permission(Permission.from_json(item))
        for item in data.get("roles") or []:
            guard.add_role(Role.from_json(item))
        return guard
