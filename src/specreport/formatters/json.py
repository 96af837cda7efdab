"""JSON formatter for archiving run results."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from specreport.formatters.base import BaseFormatter
from specreport.formatters.events import (
    ExampleNotification,
    MessageNotification,
    SeedNotification,
    SummaryNotification,
)
from specreport.formatters.notifications import Notification, register


class ExampleRecord(BaseModel):
    description: str
    full_description: str
    status: str
    location: str | None = None
    run_time: float = 0.0
    pending_message: str | None = None
    exception: dict[str, str] | None = None


class SummaryRecord(BaseModel):
    duration: float
    example_count: int
    failure_count: int
    pending_count: int


class JsonReport(BaseModel):
    version: str = "1"
    messages: list[str] = Field(default_factory=list)
    seed: int | None = None
    examples: list[ExampleRecord] = Field(default_factory=list)
    summary: SummaryRecord | None = None
    summary_line: str | None = None


def _status(example: ExampleNotification, summary: SummaryNotification) -> str:
    if example in summary.failed_examples:
        return "failed"
    if example in summary.pending_examples:
        return "pending"
    return "passed"


class JsonFormatter(BaseFormatter):
    """Collects the run into a :class:`JsonReport` and writes it on close."""

    def __init__(self, output: Any) -> None:
        super().__init__(output)
        self.report = JsonReport()

    def message(self, notification: MessageNotification) -> None:
        self.report.messages.append(notification.message)

    def seed(self, notification: SeedNotification) -> None:
        if notification.used:
            self.report.seed = notification.seed

    def dump_summary(self, notification: SummaryNotification) -> None:
        self.report.examples = [
            ExampleRecord(
                description=example.description,
                full_description=example.full_description,
                status=_status(example, notification),
                location=example.location,
                run_time=example.run_time,
                pending_message=example.pending_message,
                exception=(
                    {"class": type(example.exception).__name__, "message": str(example.exception)}
                    if example.exception is not None
                    else None
                ),
            )
            for example in notification.examples
        ]
        self.report.summary = SummaryRecord(
            duration=notification.duration,
            example_count=notification.example_count,
            failure_count=notification.failure_count,
            pending_count=notification.pending_count,
        )
        self.report.summary_line = notification.totals_line()

    def close(self, _notification: Any = None) -> None:
        self.output.write(self.report.model_dump_json(exclude_none=True))
        super().close()


register(
    JsonFormatter,
    Notification.MESSAGE,
    Notification.DUMP_SUMMARY,
    Notification.CLOSE,
    Notification.SEED,
)

__all__ = ["ExampleRecord", "JsonFormatter", "JsonReport", "SummaryRecord"]
