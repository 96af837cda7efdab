"""specreport - formatter loading and notification dispatch for test runs."""

from .config import SpecReportConfig, configure, load_config
from .errors import ConfigError, FormatterDeprecationWarning, FormatterNotFoundError
from .formatters import (
    BaseFormatter,
    BaseTextFormatter,
    Loader,
    Notification,
    formatter,
    register,
)
from .reporter import EventReporter, Reporter
from .version import __version__


__all__ = [
    # Formatters
    "BaseFormatter",
    "BaseTextFormatter",
    "Loader",
    "Notification",
    "formatter",
    "register",
    # Reporter
    "EventReporter",
    "Reporter",
    # Configuration
    "SpecReportConfig",
    "configure",
    "load_config",
    # Errors
    "ConfigError",
    "FormatterDeprecationWarning",
    "FormatterNotFoundError",
]
