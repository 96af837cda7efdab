"""Adding a custom formatter next to the built-in ones.

Run with ``python examples/custom_formatter.py``.
"""

import sys

from specreport import BaseTextFormatter, EventReporter, Loader, Notification, register
from specreport.formatters.events import ExampleNotification, StartNotification, SummaryNotification


class FailureCountFormatter(BaseTextFormatter):
    def __init__(self, output):
        super().__init__(output)
        self.failures = 0

    def example_failed(self, notification: ExampleNotification) -> None:
        self.failures += 1
        self.console.print(f"FAIL {notification.full_description}", style="bold red", markup=False)


register(FailureCountFormatter, Notification.EXAMPLE_FAILED)


class OldStyleFormatter:
    """Never registered, so it is skipped with a deprecation warning."""

    def __init__(self, output):
        self.output = output


reporter = EventReporter()
loader = Loader(reporter)
loader.add(FailureCountFormatter, sys.stdout)
loader.add("OldStyleFormatter", sys.stdout)
loader.setup_default(sys.stdout, sys.stderr)

passed = ExampleNotification(description="adds", full_description="Calculator adds")
failed = ExampleNotification(
    description="divides",
    full_description="Calculator divides",
    exception=ZeroDivisionError("division by zero"),
)

reporter.notify(Notification.START, StartNotification(count=2))
reporter.notify(Notification.EXAMPLE_PASSED, passed)
reporter.notify(Notification.EXAMPLE_FAILED, failed)
summary = SummaryNotification(duration=0.01, examples=[passed, failed], failed_examples=[failed])
reporter.notify(Notification.DUMP_FAILURES, summary)
reporter.notify(Notification.DUMP_SUMMARY, summary)
reporter.notify(Notification.DEPRECATION_SUMMARY)
