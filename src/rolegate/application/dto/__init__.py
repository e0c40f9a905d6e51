"""Application DTOs."""

from rolegate.application.dto.manager_config import ManagerConfig
from rolegate.application.dto.manager_dependencies import ManagerDependencies

__all__ = [
    "ManagerConfig",
    "ManagerDependencies",
]
