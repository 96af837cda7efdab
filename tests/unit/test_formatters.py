"""Tests for the built-in formatters driven through EventReporter."""

import io
import json

import pytest

from specreport.formatters import DeprecationFormatter, Loader, Notification
from specreport.formatters.deprecation import DeprecationNotice
from specreport.formatters.events import (
    ExampleNotification,
    GroupNotification,
    MessageNotification,
    SeedNotification,
    StartNotification,
    SummaryNotification,
)
from specreport.reporter import EventReporter

PASSED = ExampleNotification(description="adds numbers", full_description="Calculator adds numbers")
PENDING = ExampleNotification(
    description="divides",
    full_description="Calculator divides",
    pending_message="not implemented",
)
FAILED = ExampleNotification(
    description="subtracts",
    full_description="Calculator subtracts",
    location="spec/calculator.py:12",
    exception=AssertionError("expected 1, got 2"),
)
SUMMARY = SummaryNotification(
    duration=0.25,
    examples=[PASSED, PENDING, FAILED],
    failed_examples=[FAILED],
    pending_examples=[PENDING],
)


def run(reporter: EventReporter) -> None:
    reporter.notify(Notification.START, StartNotification(count=3))
    reporter.notify(Notification.EXAMPLE_GROUP_STARTED, GroupNotification(description="Calculator"))
    reporter.notify(Notification.EXAMPLE_PASSED, PASSED)
    reporter.notify(Notification.EXAMPLE_PENDING, PENDING)
    reporter.notify(Notification.EXAMPLE_FAILED, FAILED)
    reporter.notify(Notification.EXAMPLE_GROUP_FINISHED, GroupNotification(description="Calculator"))
    reporter.notify(Notification.START_DUMP)
    reporter.notify(Notification.DUMP_PENDING, SUMMARY)
    reporter.notify(Notification.DUMP_FAILURES, SUMMARY)
    reporter.notify(Notification.DUMP_SUMMARY, SUMMARY)
    reporter.notify(Notification.SEED, SeedNotification(seed=1234))
    reporter.notify(Notification.CLOSE)


@pytest.fixture
def reporter() -> EventReporter:
    return EventReporter()


@pytest.fixture
def loader(reporter, registry) -> Loader:
    return Loader(reporter, registry=registry)


def test_progress_output(loader, reporter):
    output = io.StringIO()
    loader.add("progress", output)

    run(reporter)

    text = output.getvalue()
    assert text.startswith(".*F\n")
    assert "Calculator subtracts" in text
    assert "AssertionError: expected 1, got 2" in text
    assert "3 examples, 1 failure, 1 pending" in text
    assert "Randomized with seed 1234" in text


def test_documentation_output(loader, reporter):
    output = io.StringIO()
    loader.add("documentation", output)

    run(reporter)

    lines = output.getvalue().splitlines()
    assert "Calculator" in lines
    assert "  adds numbers" in lines
    assert "  divides (PENDING: not implemented)" in lines
    assert "  subtracts (FAILED - 1)" in lines


def test_json_output(loader, reporter):
    output = io.StringIO()
    loader.add("json", output)

    reporter.notify(Notification.MESSAGE, MessageNotification(message="hello"))
    run(reporter)

    report = json.loads(output.getvalue())
    assert report["messages"] == ["hello"]
    assert report["seed"] == 1234
    assert [e["status"] for e in report["examples"]] == ["passed", "pending", "failed"]
    assert report["examples"][2]["exception"] == {"class": "AssertionError", "message": "expected 1, got 2"}
    assert report["summary"] == {
        "duration": 0.25,
        "example_count": 3,
        "failure_count": 1,
        "pending_count": 1,
    }
    assert report["summary_line"] == "3 examples, 1 failure, 1 pending"


def test_html_output(loader, reporter):
    output = io.StringIO()
    loader.add("html", output)

    reporter.notify(Notification.START, StartNotification(count=1))
    reporter.notify(
        Notification.EXAMPLE_PASSED,
        ExampleNotification(description="<b>", full_description="renders <b> tags"),
    )
    reporter.notify(Notification.DUMP_SUMMARY, SummaryNotification(duration=0.1, examples=[PASSED]))

    html = output.getvalue()
    assert html.startswith("<!DOCTYPE html>")
    assert '<li class="example passed">renders &lt;b&gt; tags</li>' in html
    assert '<p class="summary passed">1 example, 0 failures in 0.10000 seconds</p>' in html


class TestDeprecationFormatter:
    def test_writes_each_message_once(self):
        deprecations = io.StringIO()
        formatter = DeprecationFormatter(deprecations, io.StringIO())

        formatter.deprecation(DeprecationNotice(message="old thing"))
        formatter.deprecation(DeprecationNotice(message="old thing"))

        assert deprecations.getvalue() == "old thing\n"
        assert formatter.count == 1

    def test_summary_points_to_file(self, tmp_path):
        summary = io.StringIO()
        path = tmp_path / "deprecations.txt"
        with path.open("w") as deprecations:
            formatter = DeprecationFormatter(deprecations, summary)
            formatter.deprecation(DeprecationNotice(message="a"))
            formatter.deprecation(DeprecationNotice(message="b"))
            formatter.deprecation_summary()

        assert summary.getvalue() == f"\n2 deprecations logged to {path}\n"

    def test_summary_on_shared_stream(self):
        output = io.StringIO()
        formatter = DeprecationFormatter(output, output)
        formatter.deprecation(DeprecationNotice(message="a"))
        formatter.deprecation_summary()

        assert output.getvalue() == "a\n\n1 deprecation found.\n"

    def test_no_summary_without_deprecations(self):
        summary = io.StringIO()
        DeprecationFormatter(io.StringIO(), summary).deprecation_summary()

        assert summary.getvalue() == ""
