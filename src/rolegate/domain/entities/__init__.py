"""Domain entities."""

from rolegate.domain.entities.guard import Guard
from rolegate.domain.entities.permission import Permission
from rolegate.domain.entities.role import Role

__all__ = [
    "Guard",
    "Permission",
    "Role",
]
