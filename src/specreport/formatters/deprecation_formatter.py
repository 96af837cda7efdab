"""Formatter that collects deprecation messages and summarizes them."""

from __future__ import annotations

from typing import Any

from specreport.formatters.deprecation import DeprecationNotice
from specreport.formatters.notifications import Notification, register


class DeprecationFormatter:
    """Writes deprecations to ``deprecation_output``.

    When ``deprecation_output`` is a file, the full messages go there and only
    a pointer to the file is printed to ``summary_output`` at the end of the run.
    """

    def __init__(self, deprecation_output: Any, summary_output: Any) -> None:
        self.output = deprecation_output
        self.summary_output = summary_output
        self.seen: list[str] = []

    @property
    def count(self) -> int:
        return len(self.seen)

    def deprecation(self, notice: DeprecationNotice) -> None:
        if notice.message in self.seen:
            return
        self.seen.append(notice.message)
        self.output.write(f"{notice.message}\n")

    def deprecation_summary(self, _notification: Any = None) -> None:
        if not self.seen:
            return
        noun = "deprecation" if self.count == 1 else "deprecations"
        if self.output is self.summary_output:
            self.summary_output.write(f"\n{self.count} {noun} found.\n")
            return
        name = getattr(self.output, "name", None)
        if isinstance(name, str) and not name.startswith("<"):
            self.summary_output.write(f"\n{self.count} {noun} logged to {name}\n")
        else:
            self.summary_output.write(f"\n{self.count} {noun} reported.\n")


register(DeprecationFormatter, Notification.DEPRECATION, Notification.DEPRECATION_SUMMARY)

__all__ = ["DeprecationFormatter"]
