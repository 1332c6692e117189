"""Notification bus for the "file created" signal."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

FILE_CREATED = "file_created"

Handler = Callable[[str, str], None]


class EventBus:
    """Synchronous publish/subscribe bus.

    Handlers receive ``(event, path)``. Errors in handlers are isolated
    and logged so one failing subscriber cannot abort a write.
    """

    def __init__(self) -> None:
        self._subscribers: list[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        self._subscribers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        if handler in self._subscribers:
            self._subscribers.remove(handler)

    def publish(self, event: str, path: str) -> None:
        for handler in list(self._subscribers):
            try:
                handler(event, path)
            except Exception:
                logger.exception("Error in event handler %r for %s", handler, event)
