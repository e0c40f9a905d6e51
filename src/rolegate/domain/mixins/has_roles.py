"""Role-membership capability for subjects."""

from collections.abc import Iterable
from dataclasses import replace

from rolegate.domain.entities import Role
from rolegate.domain.value_objects import DEFAULT_GUARD, ByEntity, ByName, resolve_ref, to_ref


class HasRoles:
    """Mixin granting a subject role membership, scoped by guard."""

    roles: list[Role]

    def _assigned_roles(self) -> list[Role]:
        if getattr(self, "roles", None) is None:
            self.roles = []
        return self.roles

    def has_role(self, role: str | Role | ByName | ByEntity, guard_name: str | None = None) -> bool:
        ref = resolve_ref(role, guard_name)
        return any(
            r.name == ref.name and r.guard_name == ref.guard_name for r in self._assigned_roles()
        )

    def has_any_role(self, roles: Iterable[str | Role], guard_name: str | None = None) -> bool:
        return any(self.has_role(r, guard_name) for r in roles)

    def has_all_roles(self, roles: Iterable[str | Role], guard_name: str | None = None) -> bool:
        return all(self.has_role(r, guard_name) for r in roles)

    def assign_role(self, role: str | Role | ByName | ByEntity, guard_name: str | None = None) -> None:
        """Assign a copy of the role. No-op if a same-named role is assigned.

        An entity keeps its own guard unless ``guard_name`` is given.
        """
        match to_ref(role):
            case ByName(name=name):
                assigned = Role(name=name, guard_name=guard_name or DEFAULT_GUARD)
            case ByEntity(entity=entity):
                assigned = replace(entity, guard_name=guard_name or entity.guard_name)
        if self.has_role(assigned.name, assigned.guard_name):
            return
        self._assigned_roles().append(assigned)

    def remove_role(self, role: str | Role | ByName | ByEntity, guard_name: str | None = None) -> None:
        ref = resolve_ref(role, guard_name)
        self.roles = [
            r
            for r in self._assigned_roles()
            if not (r.name == ref.name and r.guard_name == ref.guard_name)
        ]

    def sync_roles(self, roles: Iterable[str | Role], guard_name: str = DEFAULT_GUARD) -> None:
        """Replace the roles of one guard; roles of other guards are kept."""
        self.roles = [r for r in self._assigned_roles() if r.guard_name != guard_name]
        for role in roles:
            self.assign_role(role, guard_name)

    def get_roles(self, guard_name: str = DEFAULT_GUARD) -> list[Role]:
        return [r for r in self._assigned_roles() if r.guard_name == guard_name]

    def get_all_roles(self) -> list[Role]:
        return list(self._assigned_roles())
