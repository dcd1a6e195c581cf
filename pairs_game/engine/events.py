"""Publish/subscribe registry for engine notifications."""
from __future__ import annotations

from collections import defaultdict
from typing import Callable, Union

from pairs_game.core.types import EventKind, GameEvent

Handler = Callable[[GameEvent], None]


def _as_kind(kind: Union[EventKind, str]) -> EventKind:
    try:
        return EventKind(kind)
    except ValueError:
        raise ValueError(f"Unknown event kind: {kind!r}") from None


class EventBus:
    """Dispatches events synchronously to handlers in registration order.

    Events are frozen dataclasses, so every handler of a kind receives
    the same payload and none of them can change what the next one sees.
    """

    def __init__(self):
        self._handlers: dict[EventKind, list[Handler]] = defaultdict(list)

    def on(self, kind: Union[EventKind, str], handler: Handler) -> Handler:
        """Register *handler* for *kind* and return it."""
        self._handlers[_as_kind(kind)].append(handler)
        return handler

    def off(self, kind: Union[EventKind, str], handler: Handler) -> bool:
        """Remove one registration of *handler*. Returns True if it was found."""
        handlers = self._handlers.get(_as_kind(kind), [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def emit(self, event: GameEvent) -> None:
        # snapshot: handlers registering others mid-dispatch take effect next time
        for handler in list(self._handlers.get(event.kind, ())):
            handler(event)

    def handler_count(self, kind: Union[EventKind, str]) -> int:
        return len(self._handlers.get(_as_kind(kind), ()))
