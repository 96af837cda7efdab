"""Tests for specreport.formatters.deprecation module."""

import logging
from pathlib import Path

import pytest

from specreport.errors import FormatterDeprecationWarning
from specreport.formatters import deprecation
from specreport.formatters.deprecation import (
    DeprecationNotice,
    first_external_call_site,
    warn_deprecation,
)
from specreport.formatters.notifications import Notification


class NotifyingReporter:
    def __init__(self):
        self.notified = []

    def register_listener(self, listener, *notifications):
        pass

    def notify(self, notification, *args):
        self.notified.append((notification, args))


def test_first_external_call_site_points_at_caller():
    site = first_external_call_site()

    assert site is not None
    filename, line = site.rsplit(":", 1)
    assert Path(filename).name == Path(__file__).name
    assert int(line) > 0


def test_first_external_call_site_is_none_when_every_frame_is_internal(monkeypatch):
    monkeypatch.setattr(deprecation, "_is_internal", lambda module_name: True)

    assert first_external_call_site() is None


def test_warning_is_attributed_to_external_caller():
    with pytest.warns(FormatterDeprecationWarning) as record:
        warn_deprecation("old api")

    assert Path(record[0].filename) == Path(__file__)


def test_warn_deprecation_issues_warning_and_logs(caplog):
    with caplog.at_level(logging.WARNING), pytest.warns(FormatterDeprecationWarning, match="old api"):
        warn_deprecation("old api")

    assert "old api" in caplog.text


def test_warn_deprecation_notifies_reporter():
    reporter = NotifyingReporter()

    with pytest.warns(FormatterDeprecationWarning):
        warn_deprecation("old api", reporter=reporter, call_site="spec/x.py:3")

    assert reporter.notified == [
        (Notification.DEPRECATION, (DeprecationNotice(message="old api", call_site="spec/x.py:3"),)),
    ]


def test_reporter_without_notify_is_ignored():
    with pytest.warns(FormatterDeprecationWarning):
        warn_deprecation("old api", reporter=object())
