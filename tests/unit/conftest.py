"""Shared fixtures for unit tests."""

from collections.abc import Hashable
from typing import Any

import pytest

from specreport.formatters.notifications import NotificationRegistry, get_notification_registry


class RecordingReporter:
    """Reporter that only records listener registrations."""

    def __init__(self) -> None:
        self.registrations: list[tuple[Any, frozenset[Hashable]]] = []

    def register_listener(self, listener: Any, *notifications: Hashable) -> None:
        self.registrations.append((listener, frozenset(notifications)))

    def listeners(self) -> list[Any]:
        return [listener for listener, _ in self.registrations]


@pytest.fixture
def reporter() -> RecordingReporter:
    """Provide a reporter that records registrations."""
    return RecordingReporter()


@pytest.fixture
def registry() -> NotificationRegistry:
    """Copy of the process-wide registry that tests can register into freely."""
    return get_notification_registry().snapshot()
