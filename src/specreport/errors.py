"""Error types for formatter setup."""

from __future__ import annotations


class SpecReportError(Exception):
    """Base class for specreport errors."""


class FormatterNotFoundError(SpecReportError, ValueError):
    """Raised when a formatter identifier cannot be resolved to a class."""

    def __init__(self, identifier: object, hint: str | None = None) -> None:
        self.identifier = identifier
        self.hint = hint

        message = f"Formatter '{identifier}' unknown"
        if hint:
            message += f" - {hint}"
        super().__init__(message)


class ConfigError(SpecReportError):
    """Raised when the [tool.specreport] table is malformed."""


class FormatterDeprecationWarning(DeprecationWarning):
    """Emitted when a formatter uses an interface that is no longer supported."""


__all__ = [
    "ConfigError",
    "FormatterDeprecationWarning",
    "FormatterNotFoundError",
    "SpecReportError",
]
