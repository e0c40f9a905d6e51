"""Subject contract used by the permission manager."""

from typing import Any, Protocol, runtime_checkable

from rolegate.domain.mixins.has_permissions import HasPermissions
from rolegate.domain.mixins.has_roles import HasRoles


@runtime_checkable
class PermissionSubject(Protocol):
    """Anything with an id that can answer permission and role queries."""

    id: Any

    def has_permission(self, permission: Any, guard_name: str | None = None) -> bool: ...

    def has_role(self, role: Any, guard_name: str | None = None) -> bool: ...


class Authorizable(HasRoles, HasPermissions):
    """Both capabilities in one base, for host user models."""

    pass
