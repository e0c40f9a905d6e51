"""References to permissions and roles, by name or by entity.

Every subject operation accepts either a plain name or an entity. The
argument is normalized to a ``ResolvedRef`` (name + guard) before any
comparison happens, so the rest of the code only ever sees names.
"""

from dataclasses import dataclass
from typing import Any

from rolegate.domain.value_objects.guard_name import DEFAULT_GUARD


@dataclass(frozen=True)
class ByName:
    """Reference by bare name."""

    name: str


@dataclass(frozen=True)
class ByEntity:
    """Reference by a Permission or Role instance."""

    entity: Any


@dataclass(frozen=True)
class ResolvedRef:
    """Canonical name + guard pair."""

    name: str
    guard_name: str


AccessRef = ByName | ByEntity


def to_ref(item: Any) -> AccessRef:
    """Wrap a name or an entity in the matching reference variant."""
    if isinstance(item, (ByName, ByEntity)):
        return item
    if isinstance(item, str):
        return ByName(item)
    return ByEntity(item)


def resolve_ref(item: Any, guard_name: str | None = None) -> ResolvedRef:
    """Resolve a name, entity or reference to a name + guard pair.

    An omitted ``guard_name`` means the default guard for names and
    entities alike; the entity's own tag is not consulted.
    """
    match to_ref(item):
        case ByName(name=name):
            return ResolvedRef(name, guard_name or DEFAULT_GUARD)
        case ByEntity(entity=entity):
            return ResolvedRef(entity.name, guard_name or DEFAULT_GUARD)
