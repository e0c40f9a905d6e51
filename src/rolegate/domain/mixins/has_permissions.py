"""Direct-permission capability for subjects."""

from collections.abc import Iterable
from dataclasses import replace

from rolegate.domain.entities import Permission, Role
from rolegate.domain.value_objects import (
    DEFAULT_GUARD,
    ByEntity,
    ByName,
    ResolvedRef,
    resolve_ref,
    to_ref,
)


def _matches(entity: Permission | Role, ref: ResolvedRef) -> bool:
    return entity.name == ref.name and entity.guard_name == ref.guard_name


class HasPermissions:
    """Mixin granting a subject direct permissions.

    The host class may define ``permissions`` (and ``roles``, read for
    role-derived lookups); missing lists are created on first write.
    Methods take a permission name or a ``Permission`` and an optional
    guard name. An omitted guard means ``web`` for names and entities.
    """

    permissions: list[Permission]
    roles: list[Role]

    def _direct_permissions(self) -> list[Permission]:
        if getattr(self, "permissions", None) is None:
            self.permissions = []
        return self.permissions

    def _role_permissions(self) -> list[Permission]:
        return [p for role in getattr(self, "roles", None) or [] for p in role.permissions]

    def has_permission(
        self, permission: str | Permission | ByName | ByEntity, guard_name: str | None = None
    ) -> bool:
        """True if held directly or through any assigned role."""
        ref = resolve_ref(permission, guard_name)
        if any(_matches(p, ref) for p in self._direct_permissions()):
            return True
        return any(_matches(p, ref) for p in self._role_permissions())

    def has_any_permission(
        self, permissions: Iterable[str | Permission], guard_name: str | None = None
    ) -> bool:
        return any(self.has_permission(p, guard_name) for p in permissions)

    def has_all_permissions(
        self, permissions: Iterable[str | Permission], guard_name: str | None = None
    ) -> bool:
        return all(self.has_permission(p, guard_name) for p in permissions)

    def has_direct_permission(
        self, permission: str | Permission | ByName | ByEntity, guard_name: str | None = None
    ) -> bool:
        ref = resolve_ref(permission, guard_name)
        return any(_matches(p, ref) for p in self._direct_permissions())

    def give_permission_to(
        self, permission: str | Permission | ByName | ByEntity, guard_name: str | None = None
    ) -> None:
        """Grant a direct permission. No-op if already granted directly.

        An entity keeps its own guard unless ``guard_name`` is given.
        """
        match to_ref(permission):
            case ByName(name=name):
                perm = Permission(name=name, guard_name=guard_name or DEFAULT_GUARD)
            case ByEntity(entity=entity):
                perm = replace(entity, guard_name=guard_name or entity.guard_name)
        if self.has_direct_permission(perm.name, perm.guard_name):
            return
        self._direct_permissions().append(perm)

    def revoke_permission_to(
        self, permission: str | Permission | ByName | ByEntity, guard_name: str | None = None
    ) -> None:
        ref = resolve_ref(permission, guard_name)
        self.permissions = [p for p in self._direct_permissions() if not _matches(p, ref)]

    def sync_permissions(
        self, permissions: Iterable[str | Permission], guard_name: str = DEFAULT_GUARD
    ) -> None:
        """Replace the direct permissions of one guard; other guards are kept."""
        self.permissions = [p for p in self._direct_permissions() if p.guard_name != guard_name]
        for permission in permissions:
            self.give_permission_to(permission, guard_name)

    def get_direct_permissions(self, guard_name: str = DEFAULT_GUARD) -> list[Permission]:
        return [p for p in self._direct_permissions() if p.guard_name == guard_name]

    def get_all_permissions(self, guard_name: str = DEFAULT_GUARD) -> list[Permission]:
        """Direct and role-derived permissions of one guard, unique by name.

        On a name clash the direct permission is kept.
        """
        merged: dict[str, Permission] = {}
        for perm in self.get_direct_permissions(guard_name):
            merged.setdefault(perm.name, perm)
        for perm in self._role_permissions():
            if perm.guard_name == guard_name:
                merged.setdefault(perm.name, perm)
        return list(merged.values())
