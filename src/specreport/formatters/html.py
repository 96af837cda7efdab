"""HTML formatter."""

from __future__ import annotations

from html import escape
from typing import Any

from specreport.formatters.base import BaseFormatter
from specreport.formatters.events import ExampleNotification, StartNotification, SummaryNotification
from specreport.formatters.notifications import Notification, register

_HEADER = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>Test results</title></head>
<body>
<ul class="examples">
"""

_FOOTER = """</ul>
<p class="summary {status}">{totals} in {duration:.5f} seconds</p>
</body>
</html>
"""


class HtmlFormatter(BaseFormatter):
    def start(self, notification: StartNotification) -> None:
        super().start(notification)
        self.output.write(_HEADER)

    def example_passed(self, notification: ExampleNotification) -> None:
        self._write_example("passed", notification)

    def example_pending(self, notification: ExampleNotification) -> None:
        self._write_example("pending", notification, notification.pending_message)

    def example_failed(self, notification: ExampleNotification) -> None:
        detail = str(notification.exception) if notification.exception is not None else None
        self._write_example("failed", notification, detail)

    def dump_summary(self, notification: SummaryNotification) -> None:
        status = "failed" if notification.failure_count else "passed"
        self.output.write(
            _FOOTER.format(status=status, totals=escape(notification.totals_line()), duration=notification.duration)
        )

    def _write_example(self, status: str, notification: ExampleNotification, detail: str | None = None) -> None:
        line = f'<li class="example {status}">{escape(notification.full_description or notification.description)}'
        if detail:
            line += f' <span class="detail">{escape(detail)}</span>'
        self.output.write(line + "</li>\n")


register(
    HtmlFormatter,
    Notification.START,
    Notification.EXAMPLE_PASSED,
    Notification.EXAMPLE_FAILED,
    Notification.EXAMPLE_PENDING,
    Notification.DUMP_SUMMARY,
)

__all__ = ["HtmlFormatter"]
