"""Output destinations for formatters."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, TextIO


def is_stream(output: Any) -> bool:
    """Whether ``output`` can be written to directly."""
    return callable(getattr(output, "write", None))


def file_at(path: str | os.PathLike[str]) -> TextIO:
    """Open ``path`` for writing, creating parent directories as needed."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target.open("w", encoding="utf-8")


def materialize(output: Any) -> Any:
    """Return ``output`` itself if it is a stream, else a new file at that path."""
    if is_stream(output):
        return output
    return file_at(output)


__all__ = ["file_at", "is_stream", "materialize"]
