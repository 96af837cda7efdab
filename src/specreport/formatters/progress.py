"""Progress formatter: one character per example."""

from __future__ import annotations

from specreport.formatters.base import BaseTextFormatter
from specreport.formatters.events import ExampleNotification, StartNotification
from specreport.formatters.notifications import Notification, register


class ProgressFormatter(BaseTextFormatter):
    """Prints ``.`` for passing, ``*`` for pending and ``F`` for failing examples."""

    def example_passed(self, _notification: ExampleNotification) -> None:
        self.console.print(".", style="green", end="")

    def example_pending(self, _notification: ExampleNotification) -> None:
        self.console.print("*", style="yellow", end="")

    def example_failed(self, _notification: ExampleNotification) -> None:
        self.console.print("F", style="red", end="")

    def start_dump(self, _notification: StartNotification | None = None) -> None:
        self.console.print()


register(
    ProgressFormatter,
    Notification.EXAMPLE_PASSED,
    Notification.EXAMPLE_PENDING,
    Notification.EXAMPLE_FAILED,
    Notification.START_DUMP,
)

__all__ = ["ProgressFormatter"]
