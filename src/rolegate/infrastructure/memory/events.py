"""In-memory event dispatcher."""

from typing import Any

from rolegate.application.ports import EventHandler


class InMemoryEventDispatcher:
    """Calls subscribed handlers synchronously, in subscription order."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    async def dispatch(self, event: str, data: Any) -> None:
        for handler in list(self._handlers.get(event, [])):
            handler(data)

    def subscribe(self, event: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)
