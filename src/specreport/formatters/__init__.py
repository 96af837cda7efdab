"""Formatter loading for specreport.

Built-in formatters:

* ``progress`` (default): prints ``.`` for passing, ``F`` for failing and
  ``*`` for pending examples
* ``documentation``: prints group and example descriptions
* ``html``
* ``json``: for archiving results for later analysis

Any other formatter is named by its qualified class name, e.g.
``MyProject::FancyFormatter``; the module is imported from the conventional
path (``my_project/fancy_formatter``) if it is not loaded yet.

Custom formatters subclass :class:`BaseFormatter` (or
:class:`BaseTextFormatter`) and declare the notifications they handle::

    class FancyFormatter(BaseTextFormatter):
        def example_passed(self, notification): ...

    register(FancyFormatter, Notification.EXAMPLE_PASSED)
"""

from specreport.formatters.base import BaseFormatter, BaseTextFormatter
from specreport.formatters.deprecation_formatter import DeprecationFormatter
from specreport.formatters.documentation import DocumentationFormatter
from specreport.formatters.html import HtmlFormatter
from specreport.formatters.json import JsonFormatter
from specreport.formatters.loader import DEFAULT_FORMATTER, Eligibility, Loader
from specreport.formatters.notifications import (
    Notification,
    NotificationRegistry,
    formatter,
    get_notification_registry,
    register,
)
from specreport.formatters.progress import ProgressFormatter
from specreport.formatters.resolver import FormatterResolver, resolve_formatter


__all__ = [
    "DEFAULT_FORMATTER",
    "BaseFormatter",
    "BaseTextFormatter",
    "DeprecationFormatter",
    "DocumentationFormatter",
    "Eligibility",
    "FormatterResolver",
    "HtmlFormatter",
    "JsonFormatter",
    "Loader",
    "Notification",
    "NotificationRegistry",
    "ProgressFormatter",
    "formatter",
    "get_notification_registry",
    "register",
    "resolve_formatter",
]
