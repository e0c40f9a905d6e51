"""Subject capability mixins."""

from rolegate.domain.mixins.has_permissions import HasPermissions
from rolegate.domain.mixins.has_roles import HasRoles
from rolegate.domain.mixins.subject import Authorizable, PermissionSubject

__all__ = [
    "Authorizable",
    "HasPermissions",
    "HasRoles",
    "PermissionSubject",
]
