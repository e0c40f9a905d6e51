"""Domain value objects."""

from rolegate.domain.value_objects.access_ref import (
    AccessRef,
    ByEntity,
    ByName,
    ResolvedRef,
    resolve_ref,
    to_ref,
)
from rolegate.domain.value_objects.guard_name import API_GUARD, DEFAULT_GUARD

__all__ = [
    "API_GUARD",
    "AccessRef",
    "ByEntity",
    "ByName",
    "DEFAULT_GUARD",
    "ResolvedRef",
    "resolve_ref",
    "to_ref",
]
