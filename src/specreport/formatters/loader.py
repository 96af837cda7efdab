"""Loads the formatters used by a single test run and subscribes them to the reporter."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from enum import Enum
from typing import Any

from specreport.formatters.deprecation import first_external_call_site, warn_deprecation
from specreport.formatters.deprecation_formatter import DeprecationFormatter
from specreport.formatters.legacy import LegacyAdapter, detect_legacy_adapter
from specreport.formatters.notifications import (
    NotificationRegistry,
    coerce_notifications,
    get_notification_registry,
)
from specreport.formatters.outputs import materialize
from specreport.formatters.resolver import FormatterResolver
from specreport.reporter import Reporter

logger = logging.getLogger(__name__)

DEFAULT_FORMATTER = "progress"


class Eligibility(Enum):
    """How a resolved formatter class can take part in a run."""

    ELIGIBLE = "eligible"
    NEEDS_ADAPTER = "needs_adapter"
    INELIGIBLE = "ineligible"


class Loader:
    """Manages the formatters of one run.

    Not meant to be shared between runs. Typical use::

        loader = Loader(reporter)
        loader.add("documentation", sys.stdout)
        loader.add("json", "reports/results.json")
        loader.setup_default(sys.stdout, sys.stderr)

    Args:
        reporter: Receives a ``register_listener`` call for every formatter added.
        registry: Notification registry to consult. Defaults to the process-wide one.
        resolver: Resolves formatter identifiers to classes.
        legacy_adapter: Adapter for old-style formatters. Detected when omitted.
        freeze_registry: Read from a snapshot of the registry taken now, so
            formatter classes defined later do not affect this run.
    """

    def __init__(
        self,
        reporter: Reporter,
        *,
        registry: NotificationRegistry | None = None,
        resolver: FormatterResolver | None = None,
        legacy_adapter: LegacyAdapter | None = None,
        freeze_registry: bool = False,
    ) -> None:
        if registry is None:
            registry = get_notification_registry()
        self._registry = registry.snapshot() if freeze_registry else registry
        self._resolver = resolver or FormatterResolver()
        self._legacy_adapter = legacy_adapter if legacy_adapter is not None else detect_legacy_adapter()
        self._reporter = reporter
        self._formatters: list[Any] = []
        self.default_formatter: Any = DEFAULT_FORMATTER

    @property
    def formatters(self) -> tuple[Any, ...]:
        """The formatters loaded so far."""
        return tuple(self._formatters)

    @property
    def reporter(self) -> Reporter:
        return self._reporter

    @property
    def registry(self) -> NotificationRegistry:
        return self._registry

    def setup_default(self, output: Any, deprecation_output: Any) -> None:
        """Make sure the run has a formatter and a deprecation formatter."""
        if not self._formatters:
            self.add(self.default_formatter, output)
        if not any(isinstance(f, DeprecationFormatter) for f in self._formatters):
            self.add(DeprecationFormatter, deprecation_output, output)

    def add(self, formatter_to_use: Any, *outputs: Any) -> Any | None:
        """Load a formatter and subscribe it to the reporter.

        Args:
            formatter_to_use: Short code, qualified class name or formatter class.
            *outputs: Streams, or paths of files to create.

        Returns:
            The active formatter, or ``None`` when the formatter uses the old
            interface and no legacy adapter is installed.

        Raises:
            FormatterNotFoundError: If ``formatter_to_use`` cannot be resolved.
            OSError: If an output file cannot be created.
        """
        formatter_cls = self._resolver.resolve(formatter_to_use)
        args = [materialize(output) for output in outputs]
        opened = [arg for arg, output in zip(args, outputs) if arg is not output]

        eligibility = self.eligibility(formatter_cls)
        if eligibility is Eligibility.ELIGIBLE:
            formatter = formatter_cls(*args)
            notifications = self.notifications_for(formatter_cls)
        elif eligibility is Eligibility.NEEDS_ADAPTER:
            formatter = self._legacy_adapter.load_formatter(formatter_cls, *args)
            notifications = frozenset(coerce_notifications(formatter.notifications))
        else:
            _close_all(opened)
            self._warn_unsupported(formatter_cls)
            return None

        existing = self._find_duplicate(formatter)
        if existing is not None:
            logger.debug("%s already writes to %r, skipping", formatter_cls.__qualname__, existing.output)
            _close_all(opened)
            return existing

        self._reporter.register_listener(formatter, *_ordered(notifications))
        self._formatters.append(formatter)
        return formatter

    def eligibility(self, formatter_cls: type) -> Eligibility:
        if self._registry.notifications_for(formatter_cls):
            return Eligibility.ELIGIBLE
        if self._legacy_adapter is not None:
            return Eligibility.NEEDS_ADAPTER
        return Eligibility.INELIGIBLE

    def notifications_for(self, formatter_cls: type) -> frozenset[Hashable]:
        return self._registry.notifications_for(formatter_cls)

    def _find_duplicate(self, new_formatter: Any) -> Any | None:
        if not hasattr(new_formatter, "output"):
            return None
        for formatter in self._formatters:
            if type(formatter) is type(new_formatter) and getattr(formatter, "output", None) == new_formatter.output:
                return formatter
        return None

    def _warn_unsupported(self, formatter_cls: type) -> None:
        line = first_external_call_site()
        if line:
            call_site = f"Formatter added at: {line}"
        else:
            call_site = "The formatter was added via command line flag or your project configuration."

        warn_deprecation(
            f"The {formatter_cls.__module__}.{formatter_cls.__qualname__} formatter uses the "
            "deprecated formatter interface not supported directly by specreport.\n\n"
            "To continue to use this formatter you must install the "
            "`specreport-legacy-formatters` package, which provides support for "
            "legacy formatters, or upgrade the formatter to a compatible version.\n\n"
            f"{call_site}",
            reporter=self._reporter,
            call_site=line,
        )


def _close_all(files: list[Any]) -> None:
    for file in files:
        file.close()


def _ordered(notifications: frozenset[Hashable]) -> list[Hashable]:
    return sorted(notifications, key=lambda n: str(getattr(n, "value", n)))


__all__ = ["DEFAULT_FORMATTER", "Eligibility", "Loader"]
