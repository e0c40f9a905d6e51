"""Identity and timestamp helpers shared by entities."""

from datetime import UTC, datetime
from uuid import uuid4


def new_id() -> str:
    """Generate an opaque entity id."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


def parse_timestamp(value: datetime | str | None) -> datetime:
    """Accept a datetime, an ISO-8601 string or None (meaning now)."""
    if value is None:
        return utc_now()
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
