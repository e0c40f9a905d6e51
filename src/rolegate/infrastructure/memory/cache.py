"""In-memory cache with per-entry expiry."""

import time
from collections.abc import Callable
from typing import Any

from loguru import logger

DEFAULT_TTL = 3600


class InMemoryCacheService:
    """Cache service backed by a dict. Expired entries are dropped on read."""

    def __init__(
        self,
        default_ttl: int = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() > expires_at:
            del self._entries[key]
            logger.debug("Cache entry {} expired", key)
            return None
        return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        seconds = self._default_ttl if ttl is None else ttl
        self._entries[key] = (value, self._clock() + seconds)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def clear(self) -> None:
        self._entries.clear()
