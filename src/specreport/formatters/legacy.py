"""Optional support for formatters written against the old formatter interface.

Old-style formatters implement every reporter callback as a method and never
register notifications. The ``specreport-legacy-formatters`` distribution
wraps such classes; when it is not installed these formatters are skipped.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Hashable, Iterable
from typing import Any, Protocol

logger = logging.getLogger(__name__)

LEGACY_MODULE = "specreport_legacy_formatters"


class LegacyFormatter(Protocol):
    """Instance returned by a legacy adapter."""

    notifications: Iterable[Hashable]


class LegacyAdapter(Protocol):
    """Wraps an old-style formatter class so the reporter can drive it."""

    def load_formatter(self, formatter_cls: type, *outputs: Any) -> LegacyFormatter: ...


def detect_legacy_adapter(module_name: str = LEGACY_MODULE) -> LegacyAdapter | None:
    """Return the legacy adapter module if it is installed."""
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        if exc.name != module_name:
            raise
        return None
    logger.debug("Legacy formatter support provided by %s", module_name)
    return module


__all__ = ["LEGACY_MODULE", "LegacyAdapter", "LegacyFormatter", "detect_legacy_adapter"]
