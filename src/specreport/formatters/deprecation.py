"""Deprecation diagnostics raised while setting up formatters."""

from __future__ import annotations

import inspect
import logging
import warnings
from dataclasses import dataclass
from typing import Any

from specreport.errors import FormatterDeprecationWarning
from specreport.formatters.notifications import Notification

logger = logging.getLogger(__name__)

_PACKAGE = __name__.split(".", 1)[0]


@dataclass(frozen=True, slots=True)
class DeprecationNotice:
    """Payload of a ``deprecation`` notification."""

    message: str
    call_site: str | None = None


def _is_internal(module_name: str) -> bool:
    return module_name == _PACKAGE or module_name.startswith(_PACKAGE + ".")


def first_external_call_site() -> str | None:
    """Return ``"file:line"`` of the nearest caller outside this package."""
    frame = inspect.currentframe()
    if frame is None:
        logger.debug("No frame available to locate call site")
        return None

    frame = frame.f_back
    try:
        while frame:
            module_name = frame.f_globals.get("__name__", "")
            if not _is_internal(module_name):
                return f"{frame.f_code.co_filename}:{frame.f_lineno}"
            frame = frame.f_back
        return None
    finally:
        del frame


def _external_stacklevel() -> int:
    """Stack level of the nearest caller outside this package, for ``warnings.warn``."""
    frame = inspect.currentframe()
    level = 0
    try:
        # level 1 is warn_deprecation itself
        frame = frame.f_back if frame is not None else None
        while frame is not None:
            level += 1
            if not _is_internal(frame.f_globals.get("__name__", "")):
                return level
            frame = frame.f_back
        return max(level, 1)
    finally:
        del frame


def warn_deprecation(
    message: str,
    reporter: Any = None,
    call_site: str | None = None,
    stacklevel: int | None = None,
) -> None:
    """Emit a deprecation message.

    The message is issued as a :class:`FormatterDeprecationWarning`, logged,
    and sent as a ``deprecation`` notification when ``reporter`` can notify
    its listeners. Unless ``stacklevel`` is given, the warning is attributed
    to the nearest caller outside this package.
    """
    if stacklevel is None:
        stacklevel = _external_stacklevel()
    logger.warning(message)
    warnings.warn(message, FormatterDeprecationWarning, stacklevel=stacklevel)

    notify = getattr(reporter, "notify", None)
    if callable(notify):
        notify(Notification.DEPRECATION, DeprecationNotice(message=message, call_site=call_site))


__all__ = ["DeprecationNotice", "first_external_call_site", "warn_deprecation"]
