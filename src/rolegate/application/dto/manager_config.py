"""Permission manager configuration DTO."""

from dataclasses import dataclass

from rolegate.domain.value_objects import DEFAULT_GUARD


@dataclass
class ManagerConfig:
    """Configuration for PermissionManager.

    ``cache_enabled`` gates whether ``clear_cache`` reaches the cache
    service. ``cache_ttl`` is advisory, in seconds.
    """

    cache_enabled: bool = False
    cache_ttl: int = 3600
    default_guard: str = DEFAULT_GUARD
