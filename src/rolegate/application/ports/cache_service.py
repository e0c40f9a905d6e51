"""Cache service port."""

from typing import Any, Protocol


class CacheService(Protocol):
    """Port for a key-value cache. TTL is advisory; expiry is the adapter's job."""

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def clear(self) -> None: ...
