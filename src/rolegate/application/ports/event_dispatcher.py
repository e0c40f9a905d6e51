"""Event dispatcher port."""

from collections.abc import Callable
from typing import Any, Protocol

EventHandler = Callable[[Any], None]


class EventDispatcher(Protocol):
    """Port for domain event delivery.

    The manager only calls ``dispatch``; subscription is for the host.
    """

    async def dispatch(self, event: str, data: Any) -> None: ...

    def subscribe(self, event: str, handler: EventHandler) -> None: ...

    def unsubscribe(self, event: str, handler: EventHandler) -> None: ...
