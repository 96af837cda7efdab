"""Reporter interface consumed by the formatter loader."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Hashable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Event dispatcher that formatters subscribe to."""

    def register_listener(self, listener: Any, *notifications: Hashable) -> None:
        """Subscribe ``listener`` to each of ``notifications``."""
        ...


class EventReporter:
    """Minimal in-process reporter.

    Listeners are called in registration order. A notification is delivered
    by calling the listener method named after it (``example_passed`` for
    ``Notification.EXAMPLE_PASSED``).
    """

    def __init__(self) -> None:
        self._listeners: dict[Hashable, list[Any]] = defaultdict(list)

    def register_listener(self, listener: Any, *notifications: Hashable) -> None:
        for notification in notifications:
            self._listeners[notification].append(listener)

    def registered_listeners(self, notification: Hashable) -> list[Any]:
        return list(self._listeners.get(notification, ()))

    def notify(self, notification: Hashable, *args: Any) -> None:
        method_name = getattr(notification, "value", notification)
        for listener in self._listeners.get(notification, ()):
            method = getattr(listener, str(method_name), None)
            if method is None:
                logger.debug("%r has no handler for %s", listener, method_name)
                continue
            method(*args)


__all__ = ["EventReporter", "Reporter"]
