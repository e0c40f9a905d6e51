"""rolegate - role-based access control model with guard-scoped permissions."""

from loguru import logger

from rolegate.application.dto import ManagerConfig, ManagerDependencies
from rolegate.application.permission_manager import (
    PermissionCheck,
    PermissionManager,
    RoleCheck,
)
from rolegate.domain.entities import Guard, Permission, Role
from rolegate.domain.exceptions import (
    GuardMismatch,
    GuardNotFound,
    PermissionException,
    PermissionNotFound,
    RoleGateError,
    RoleNotFound,
)
from rolegate.domain.mixins import Authorizable, HasPermissions, HasRoles, PermissionSubject

__version__ = "0.1.0"

logger.disable("rolegate")

__all__ = [
    "Authorizable",
    "Guard",
    "GuardMismatch",
    "GuardNotFound",
    "HasPermissions",
    "HasRoles",
    "ManagerConfig",
    "ManagerDependencies",
    "Permission",
    "PermissionCheck",
    "PermissionException",
    "PermissionManager",
    "PermissionNotFound",
    "PermissionSubject",
    "Role",
    "RoleCheck",
    "RoleGateError",
    "RoleNotFound",
    "__version__",
]
