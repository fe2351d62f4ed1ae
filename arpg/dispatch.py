"""A simple handler registry keyed by event name."""

import threading
from typing import Any, Callable

Handler = Callable[[Any], None]


class EventDispatcher:
    """Calls every handler registered for an event type, in registration order."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}
        self._lock = threading.Lock()

    def register_handler(self, event_type: str, handler: Handler) -> None:
        """Add a handler for an event type."""
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)

    def emit(self, event_type: str, data: Any) -> None:
        """Pass ``data`` to each handler registered for ``event_type``."""
        with self._lock:
            handlers = list(self._handlers.get(event_type, ()))
        for handler in handlers:
            handler(data)