"""Notification kinds and the registry of formatter subscriptions."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable, Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeVar


T = TypeVar("T", bound=type)


class Notification(Enum):
    """Lifecycle events the reporter can send to a formatter."""

    START = "start"
    EXAMPLE_GROUP_STARTED = "example_group_started"
    EXAMPLE_GROUP_FINISHED = "example_group_finished"
    EXAMPLE_STARTED = "example_started"
    EXAMPLE_PASSED = "example_passed"
    EXAMPLE_FAILED = "example_failed"
    EXAMPLE_PENDING = "example_pending"
    MESSAGE = "message"
    STOP = "stop"
    START_DUMP = "start_dump"
    DUMP_PENDING = "dump_pending"
    DUMP_FAILURES = "dump_failures"
    DUMP_SUMMARY = "dump_summary"
    SEED = "seed"
    CLOSE = "close"
    DEPRECATION = "deprecation"
    DEPRECATION_SUMMARY = "deprecation_summary"


class NotificationRegistry:
    """Maps formatter classes to the notifications they declared.

    Entries are written once per class, when the class is defined, and are
    never removed. Registering the same class again replaces its entry.
    Writes are serialized; readers that need a stable view during a run
    should take a :meth:`snapshot`.
    """

    def __init__(self, entries: Mapping[type, Iterable[Hashable]] | None = None) -> None:
        self._entries: dict[type, frozenset[Hashable]] = {}
        self._lock = threading.Lock()
        for formatter_cls, notifications in (entries or {}).items():
            self._entries[formatter_cls] = frozenset(notifications)

    def register(self, formatter_cls: type, *notifications: Hashable) -> None:
        """Record the notifications ``formatter_cls`` wants to receive."""
        with self._lock:
            self._entries[formatter_cls] = frozenset(notifications)

    def get(self, formatter_cls: type) -> frozenset[Hashable] | None:
        """Return the entry registered for exactly ``formatter_cls``."""
        return self._entries.get(formatter_cls)

    def __contains__(self, formatter_cls: object) -> bool:
        return formatter_cls in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def is_registered(self, formatter_cls: type) -> bool:
        """Whether the class or one of its ancestors has an entry."""
        return any(klass in self._entries for klass in formatter_cls.__mro__)

    def notifications_for(self, formatter_cls: type) -> frozenset[Hashable]:
        """Union of the entries of ``formatter_cls`` and all of its ancestors."""
        notifications: set[Hashable] = set()
        for klass in formatter_cls.__mro__:
            notifications.update(self._entries.get(klass, ()))
        return frozenset(notifications)

    def entries(self) -> Mapping[type, frozenset[Hashable]]:
        """Read-only view of the raw entries."""
        return MappingProxyType(self._entries)

    def snapshot(self) -> NotificationRegistry:
        """Copy of the registry that later registrations do not affect."""
        with self._lock:
            return NotificationRegistry(dict(self._entries))


_default_registry = NotificationRegistry()


def get_notification_registry() -> NotificationRegistry:
    """Get the process-wide notification registry."""
    return _default_registry


def register(formatter_cls: type, *notifications: Hashable) -> None:
    """Register a formatter class with the notifications it handles.

    Call this once, right after defining the class::

        class MyFormatter(BaseFormatter):
            def example_passed(self, notification): ...

        register(MyFormatter, Notification.EXAMPLE_PASSED)

    Notifications registered on a base class are inherited by subclasses.
    """
    _default_registry.register(formatter_cls, *notifications)


def formatter(
    *notifications: Hashable,
    registry: NotificationRegistry | None = None,
) -> Callable[[T], T]:
    """Decorator form of :func:`register`.

        @formatter(Notification.EXAMPLE_PASSED, Notification.EXAMPLE_FAILED)
        class MyFormatter(BaseFormatter): ...
    """

    def decorator(cls: T) -> T:
        (registry if registry is not None else _default_registry).register(cls, *notifications)
        return cls

    return decorator


def coerce_notifications(values: Iterable[Any]) -> list[Hashable]:
    """Turn notification names into :class:`Notification` members where possible."""
    coerced: list[Hashable] = []
    for value in values:
        if isinstance(value, str):
            try:
                coerced.append(Notification(value))
                continue
            except ValueError:
                pass
        coerced.append(value)
    return coerced


__all__ = [
    "Notification",
    "NotificationRegistry",
    "coerce_notifications",
    "formatter",
    "get_notification_registry",
    "register",
]
