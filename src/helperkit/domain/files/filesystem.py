"""Path normalisation and directory preparation."""

from __future__ import annotations

import os
import re
from pathlib import Path

_CURRENT_DIR = re.compile(r"/\./")
_SEPARATOR_RUN = re.compile(r"[/\\]+")
UNC_PREFIX = "\\\\"


def format_path(path: str, separator: str = os.sep) -> str:
    """Normalise separators in ``path``.

    ``/./`` segments and runs of ``/`` or ``\\`` collapse to a single
    ``separator``. A leading ``\\\\`` (Windows UNC share) is kept as is.
    """
    path = _CURRENT_DIR.sub("/", str(path))
    is_unc = path.startswith(UNC_PREFIX)
    if is_unc:
        path = path[2:]
    path = _SEPARATOR_RUN.sub(lambda _: separator, path)
    return (UNC_PREFIX if is_unc else "") + path


def dirname(path: str, separator: str = os.sep) -> str:
    """Return the directory part of ``path`` with a trailing separator.

    A path that already ends with a separator is a directory and comes back
    unchanged (apart from normalisation).
    """
    formatted = format_path(path, separator)
    if formatted.endswith(separator):
        return formatted
    if separator not in formatted:
        return "." + separator
    return formatted.rpartition(separator)[0] + separator


def create_directories(path: str) -> bool:
    """Create the directory holding ``path`` (and its parents) if needed."""
    directory = Path(dirname(path))
    if directory.exists():
        return True
    directory.mkdir(parents=True, exist_ok=True)
    return True


def initialize_file(path: str | Path) -> None:
    """Prepare ``path`` for writing: delete any existing file, create its directory."""
    path = Path(path)
    path.unlink(missing_ok=True)
    path.parent.mkdir(parents=True, exist_ok=True)
