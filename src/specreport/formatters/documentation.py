"""Documentation formatter: prints group and example descriptions as a tree."""

from __future__ import annotations

from specreport.formatters.base import BaseTextFormatter
from specreport.formatters.events import ExampleNotification, GroupNotification
from specreport.formatters.notifications import Notification, register


class DocumentationFormatter(BaseTextFormatter):
    def __init__(self, output) -> None:
        super().__init__(output)
        self._group_level = 0
        self._failure_index = 0

    def example_group_started(self, notification: GroupNotification) -> None:
        super().example_group_started(notification)
        if self._group_level == 0:
            self.console.print()
        self.console.print(f"{self._indent}{notification.description}", markup=False)
        self._group_level += 1

    def example_group_finished(self, _notification: GroupNotification | None = None) -> None:
        self._group_level = max(0, self._group_level - 1)

    def example_passed(self, notification: ExampleNotification) -> None:
        self.console.print(f"{self._indent}{notification.description}", style="green", markup=False)

    def example_pending(self, notification: ExampleNotification) -> None:
        reason = notification.pending_message or "No reason given"
        self.console.print(
            f"{self._indent}{notification.description} (PENDING: {reason})",
            style="yellow",
            markup=False,
        )

    def example_failed(self, notification: ExampleNotification) -> None:
        self._failure_index += 1
        self.console.print(
            f"{self._indent}{notification.description} (FAILED - {self._failure_index})",
            style="red",
            markup=False,
        )

    @property
    def _indent(self) -> str:
        return "  " * self._group_level


register(
    DocumentationFormatter,
    Notification.EXAMPLE_GROUP_STARTED,
    Notification.EXAMPLE_GROUP_FINISHED,
    Notification.EXAMPLE_PASSED,
    Notification.EXAMPLE_PENDING,
    Notification.EXAMPLE_FAILED,
)

__all__ = ["DocumentationFormatter"]
