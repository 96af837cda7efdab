"""Base classes for formatters."""

from __future__ import annotations

from typing import Any

from rich.console import Console

from specreport.formatters.events import (
    GroupNotification,
    MessageNotification,
    SeedNotification,
    StartNotification,
    SummaryNotification,
)
from specreport.formatters.notifications import Notification, register


class BaseFormatter:
    """Holds the output stream and tracks run state.

    Subclass this and register the notifications your subclass handles with
    :func:`specreport.formatters.register`. Notifications registered here are
    inherited.
    """

    def __init__(self, output: Any) -> None:
        self.output = output
        self.example_count = 0
        self.example_group: GroupNotification | None = None

    def start(self, notification: StartNotification) -> None:
        self.example_count = notification.count

    def example_group_started(self, notification: GroupNotification) -> None:
        self.example_group = notification

    def close(self, _notification: Any = None) -> None:
        flush = getattr(self.output, "flush", None)
        if flush is not None:
            flush()


register(BaseFormatter, Notification.START, Notification.EXAMPLE_GROUP_STARTED, Notification.CLOSE)


class BaseTextFormatter(BaseFormatter):
    """Base for formatters that write human readable text."""

    def __init__(self, output: Any) -> None:
        super().__init__(output)
        self.console = Console(file=output, highlight=False, emoji=False, soft_wrap=True)

    def message(self, notification: MessageNotification) -> None:
        self.console.print(notification.message, markup=False)

    def dump_failures(self, notification: SummaryNotification) -> None:
        if not notification.failed_examples:
            return
        self.console.print()
        self.console.print("Failures:")
        for index, example in enumerate(notification.failed_examples, start=1):
            self.console.print()
            self.console.print(f"  {index}) {example.full_description}", markup=False)
            if example.exception is not None:
                self.console.print(
                    f"     {type(example.exception).__name__}: {example.exception}",
                    style="red",
                    markup=False,
                )
            if example.location:
                self.console.print(f"     # {example.location}", style="cyan", markup=False)

    def dump_pending(self, notification: SummaryNotification) -> None:
        if not notification.pending_examples:
            return
        self.console.print()
        self.console.print("Pending:")
        for example in notification.pending_examples:
            self.console.print(f"  {example.full_description}", style="yellow", markup=False)
            if example.pending_message:
                self.console.print(f"    # {example.pending_message}", style="cyan", markup=False)

    def dump_summary(self, notification: SummaryNotification) -> None:
        self.console.print()
        self.console.print(f"Finished in {notification.duration:.5f} seconds")
        style = "red" if notification.failure_count else ("yellow" if notification.pending_count else "green")
        self.console.print(notification.totals_line(), style=style)

    def seed(self, notification: SeedNotification) -> None:
        if notification.used:
            self.console.print()
            self.console.print(f"Randomized with seed {notification.seed}")


register(
    BaseTextFormatter,
    Notification.MESSAGE,
    Notification.DUMP_SUMMARY,
    Notification.DUMP_FAILURES,
    Notification.DUMP_PENDING,
    Notification.SEED,
)


__all__ = ["BaseFormatter", "BaseTextFormatter"]
