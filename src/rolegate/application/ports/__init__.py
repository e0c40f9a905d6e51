"""Application ports - interfaces for external adapters."""

from rolegate.application.ports.cache_service import CacheService
from rolegate.application.ports.event_dispatcher import EventDispatcher, EventHandler
from rolegate.application.ports.repositories import (
    GuardRepository,
    PermissionRepository,
    RoleRepository,
)

__all__ = [
    "CacheService",
    "EventDispatcher",
    "EventHandler",
    "GuardRepository",
    "PermissionRepository",
    "RoleRepository",
]
