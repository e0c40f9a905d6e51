"""Permission entity - named capability scoped to a guard."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from rolegate.domain.entities.identity import new_id, parse_timestamp, utc_now
from rolegate.domain.value_objects import DEFAULT_GUARD


@dataclass(eq=False)
class Permission:
    """Permission - e.g. ``edit-users`` under the ``web`` guard.

    Two permissions are equal when id, name and guard name all match.
    """

    name: str = ""
    guard_name: str = DEFAULT_GUARD
    id: str = field(default_factory=new_id)
    description: str | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return (self.id, self.name, self.guard_name) == (
            other.id,
            other.name,
            other.guard_name,
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.guard_name))

    def copy(self) -> "Permission":
        return replace(self)

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "guard_name": self.guard_name,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Permission":
        """Build from ``to_json`` output. Missing fields take their defaults."""
        return cls(
            name=data.get("name") or "",
            guard_name=data.get("guard_name") or DEFAULT_GUARD,
            id=data.get("id") or new_id(),
            description=data.get("description"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )
