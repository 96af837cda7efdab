"""Resolution of formatter identifiers to formatter classes.

An identifier is one of:

- a built-in short code (``"p"``, ``"progress"``, ``"d"``, ``"doc"``, ...),
- a formatter class, which resolves to itself,
- a qualified class name such as ``"MyProject::Formatters::Fancy"`` or
  ``"MyProject.Formatters.Fancy"``.

Qualified names are looked up among already loaded modules first. When a
component is missing, the module path is derived from the name by convention
(``"MyProject::FancyFormatter"`` -> ``my_project/fancy_formatter``), that path
is imported once, and the lookup is retried once.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import re
import sys
from collections.abc import Callable
from types import ModuleType
from typing import Any

from specreport.errors import FormatterNotFoundError

logger = logging.getLogger(__name__)

BUILTIN_FORMATTERS: dict[str, str] = {
    "d": "specreport.formatters.documentation:DocumentationFormatter",
    "doc": "specreport.formatters.documentation:DocumentationFormatter",
    "documentation": "specreport.formatters.documentation:DocumentationFormatter",
    "h": "specreport.formatters.html:HtmlFormatter",
    "html": "specreport.formatters.html:HtmlFormatter",
    "p": "specreport.formatters.progress:ProgressFormatter",
    "progress": "specreport.formatters.progress:ProgressFormatter",
    "j": "specreport.formatters.json:JsonFormatter",
    "json": "specreport.formatters.json:JsonFormatter",
}

UNKNOWN_FORMATTER_HINT = "maybe you meant 'documentation' or 'progress'?"

_QUALIFIED_NAME = re.compile(r"\A[A-Z][A-Za-z0-9_]*(?:(?:::|\.)[A-Za-z0-9_]+)*\Z")
_SEPARATOR = re.compile(r"::|\.")

Loader = Callable[[str], Any]


def underscore(name: str) -> str:
    """Convert a CamelCase qualified name into a slash separated path.

    >>> underscore("MyProject::HTMLFormatter")
    'my_project/html_formatter'
    """
    word = _SEPARATOR.sub("/", name)
    word = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", word)
    word = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", word)
    word = word.replace("-", "_").lower()
    # "RSpec" is one word
    return re.sub(r"(^|/)r_spec($|/)", r"\1rspec\2", word, count=1)


def path_for(qualified_name: str) -> str:
    """Conventional module path for a qualified class name."""
    return underscore(qualified_name)


def is_qualified_name(identifier: object) -> bool:
    return isinstance(identifier, str) and _QUALIFIED_NAME.match(identifier) is not None


def import_path(path: str) -> ModuleType:
    """Import the module at a slash separated ``path``."""
    return importlib.import_module(path.replace("/", "."))


def _import_class(import_string: str) -> type:
    module_path, class_name = import_string.split(":", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def _child(namespace: object | None, name: str, *, last: bool) -> object | None:
    """Look ``name`` up inside ``namespace`` without importing anything.

    ``None`` stands for the top level: ``__main__`` and loaded top-level
    modules. Inside a module, a loaded submodule named after the component
    also counts; for the final component the class inside it is preferred.
    """
    if namespace is None:
        candidate = getattr(sys.modules.get("__main__"), name, None)
        if candidate is not None:
            return candidate
        module = sys.modules.get(underscore(name))
    else:
        candidate = getattr(namespace, name, None)
        if candidate is not None:
            return candidate
        if not inspect.ismodule(namespace):
            return None
        module = sys.modules.get(f"{namespace.__name__}.{underscore(name)}")

    if module is None:
        return None
    if last:
        return getattr(module, name, None)
    return module


def lookup(qualified_name: str) -> type | None:
    """Find an already loaded class by its qualified name."""
    parts = _SEPARATOR.split(qualified_name)
    namespace: object | None = None
    for index, part in enumerate(parts):
        namespace = _child(namespace, part, last=index == len(parts) - 1)
        if namespace is None:
            return None
    return namespace if isinstance(namespace, type) else None


class FormatterResolver:
    """Resolve formatter identifiers to classes.

    Args:
        load: Called with a derived module path (``"my_project/fancy"``) when a
            qualified name is not loaded yet. ``None`` disables loading, so
            any name that is not already loaded is reported as unknown.
    """

    def __init__(self, load: Loader | None = import_path) -> None:
        self._load = load

    def resolve(self, identifier: Any) -> type:
        formatter_cls = self.builtin(identifier) or self.custom(identifier)
        if formatter_cls is None:
            raise FormatterNotFoundError(identifier, hint=UNKNOWN_FORMATTER_HINT)
        logger.debug("Resolved formatter %r to %s", identifier, formatter_cls.__qualname__)
        return formatter_cls

    def builtin(self, identifier: Any) -> type | None:
        if not isinstance(identifier, str):
            return None
        import_string = BUILTIN_FORMATTERS.get(identifier)
        if import_string is None:
            return None
        return _import_class(import_string)

    def custom(self, identifier: Any) -> type | None:
        if isinstance(identifier, type):
            return identifier
        if is_qualified_name(identifier):
            return self._find_qualified(identifier)
        return None

    def _find_qualified(self, name: str) -> type:
        formatter_cls = lookup(name)
        if formatter_cls is not None:
            return formatter_cls
        if self._load is None:
            raise FormatterNotFoundError(name)

        path = path_for(name)
        logger.debug("Formatter %s not loaded, loading %s", name, path)
        module_name = path.replace("/", ".")
        try:
            self._load(path)
        except ModuleNotFoundError as exc:
            if exc.name and not (module_name == exc.name or module_name.startswith(exc.name + ".")):
                raise
            raise FormatterNotFoundError(name) from exc

        formatter_cls = lookup(name)
        if formatter_cls is None:
            raise FormatterNotFoundError(name)
        return formatter_cls


_default_resolver = FormatterResolver()


def resolve_formatter(identifier: Any) -> type:
    """Resolve ``identifier`` with the default resolver."""
    return _default_resolver.resolve(identifier)


__all__ = [
    "BUILTIN_FORMATTERS",
    "FormatterResolver",
    "import_path",
    "is_qualified_name",
    "lookup",
    "path_for",
    "resolve_formatter",
    "underscore",
]
