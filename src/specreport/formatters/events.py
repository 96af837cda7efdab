"""Payloads the reporter passes to formatter callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class StartNotification:
    count: int = 0
    load_time: float = 0.0


@dataclass(frozen=True, slots=True)
class GroupNotification:
    description: str
    depth: int = 0


@dataclass(frozen=True, slots=True)
class ExampleNotification:
    """An example that started or finished.

    Attributes
    ----------
    description
        The example's own description.
    full_description
        Description including the enclosing groups.
    location
        ``"file:line"`` of the example.
    exception
        Failure, for ``example_failed``.
    pending_message
        Reason, for ``example_pending``.
    """

    description: str
    full_description: str = ""
    location: str | None = None
    run_time: float = 0.0
    exception: BaseException | None = None
    pending_message: str | None = None


@dataclass(frozen=True, slots=True)
class MessageNotification:
    message: str


@dataclass(frozen=True, slots=True)
class SeedNotification:
    seed: int
    used: bool = True


@dataclass(frozen=True, slots=True)
class SummaryNotification:
    duration: float
    examples: list[ExampleNotification] = field(default_factory=list)
    failed_examples: list[ExampleNotification] = field(default_factory=list)
    pending_examples: list[ExampleNotification] = field(default_factory=list)

    @property
    def example_count(self) -> int:
        return len(self.examples)

    @property
    def failure_count(self) -> int:
        return len(self.failed_examples)

    @property
    def pending_count(self) -> int:
        return len(self.pending_examples)

    def totals_line(self) -> str:
        line = f"{self.example_count} example{'s' if self.example_count != 1 else ''}, "
        line += f"{self.failure_count} failure{'s' if self.failure_count != 1 else ''}"
        if self.pending_count:
            line += f", {self.pending_count} pending"
        return line


__all__ = [
    "ExampleNotification",
    "GroupNotification",
    "MessageNotification",
    "SeedNotification",
    "StartNotification",
    "SummaryNotification",
]
