"""Project configuration for formatter setup.

Reads the ``[tool.specreport]`` table of the nearest ``pyproject.toml``::

    [tool.specreport]
    default_formatter = "documentation"
    deprecation_output = "log/deprecations.txt"

    [[tool.specreport.formatters]]
    format = "json"
    outputs = ["reports/results.json"]

``SPECREPORT_DEFAULT_FORMATTER`` (from the environment or a ``.env`` file)
overrides ``default_formatter``.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from specreport.errors import ConfigError
from specreport.formatters.loader import DEFAULT_FORMATTER, Loader

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"
DEFAULT_FORMATTER_ENV = "SPECREPORT_DEFAULT_FORMATTER"


class FormatterEntry(BaseModel):
    """One formatter to add: its identifier and where it writes."""

    format: str
    outputs: list[str] = Field(default_factory=list)


class SpecReportConfig(BaseModel):
    default_formatter: str = DEFAULT_FORMATTER
    formatters: list[FormatterEntry] = Field(default_factory=list)
    deprecation_output: str | None = None


DEFAULT_CONFIG = SpecReportConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def _read_table(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        try:
            data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise ConfigError(msg) from exc
    return data.get("tool", {}).get("specreport", {})


def load_config(path: Path | None = None) -> SpecReportConfig:
    """Load configuration from ``path`` or the nearest pyproject.toml."""
    load_dotenv()

    pyproject = path or find_pyproject()
    table: dict[str, Any] = {}
    if pyproject is not None and pyproject.exists():
        table = _read_table(pyproject)
        logger.debug("Loaded [tool.specreport] from %s", pyproject)

    env_default = os.environ.get(DEFAULT_FORMATTER_ENV)
    if env_default:
        table = {**table, "default_formatter": env_default}

    try:
        return SpecReportConfig.model_validate(table)
    except ValidationError as exc:
        msg = f"Invalid [tool.specreport] configuration: {exc}"
        raise ConfigError(msg) from exc


def configure(loader: Loader, config: SpecReportConfig, output: Any, deprecation_output: Any) -> None:
    """Add the configured formatters to ``loader`` and fill in the defaults.

    Formatters without outputs write to ``output``. A configured
    ``deprecation_output`` path takes precedence over ``deprecation_output``.
    """
    loader.default_formatter = config.default_formatter
    for entry in config.formatters:
        loader.add(entry.format, *(entry.outputs or [output]))
    loader.setup_default(output, config.deprecation_output or deprecation_output)


__all__ = [
    "DEFAULT_CONFIG",
    "FormatterEntry",
    "SpecReportConfig",
    "configure",
    "find_pyproject",
    "load_config",
]
