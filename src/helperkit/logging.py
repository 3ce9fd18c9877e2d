"""Logging set-up for the helperkit CLI.

Two handlers hang off the root logger:

* a Rich console handler on stderr, filtered by the ``-v``/``-q`` level;
* an optional flight recorder: a ``MemoryHandler`` buffering every record at
  DEBUG and dumping the buffer to a log file as soon as a WARNING (or worse)
  shows up.

Library modules only call ``logging.getLogger(__name__)``; handlers are the
CLI's business. On the console, records of other libraries (httpx,
httpcore, phonenumbers) carry a ``[name]`` tag.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal

import httpx
import phonenumbers
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "helperkit"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s [pid=%(process)d %(threadName)s] "
    "%(filename)s:%(lineno)d: %(message)s"
)

ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[<top-level package>]`` for foreign loggers.

    helperkit's own records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.split(".", 1)[0]
        record.prefix = "" if top_level == PROJECT_PREFIX else f"[{top_level}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Console handler writing to stderr.

    In debug mode every level is shown, with timestamps, logger names and a
    clickable source path; otherwise foreign records are tagged by
    :class:`ThirdPartyPrefixFilter`.

    Args:
        level: Minimum level shown outside debug mode.
        debug_mode: Verbose layout, DEBUG level.
        color: False for plain output (click-extra's ``--no-color``).
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def _recorder_target(path: Path) -> logging.FileHandler:
    # "w": each run starts a fresh file
    path.parent.mkdir(parents=True, exist_ok=True)
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return target


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Flight recorder writing to ``path``.

    The last ``capacity`` records stay in memory. A record at
    ``flush_level`` or above writes the whole buffer out; so does closing
    the handler when ``flush_on_close`` is set.
    """
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=_recorder_target(path),
        flushOnClose=flush_on_close,
    )


def _level_names(levels: dict[str, int]) -> dict[str, str]:
    return {name: logging.getLevelName(value) for name, value in levels.items()}


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """Announce the run at INFO, then dump the environment at DEBUG.

    The DEBUG lines mostly end up in the flight recorder, where they help
    make sense of a log file sent in with a bug report.
    """
    logger.info(
        "helperkit %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    diagnostics: list[tuple[str, object]] = [
        ("Python", sys.version.split()[0]),
        ("Platform", f"{platform.system()} {platform.release()}"),
        ("PID", os.getpid()),
        ("CWD", Path.cwd()),
        ("httpx", httpx.__version__),
        ("phonenumbers", phonenumbers.__version__),
        ("Handlers", [type(handler).__name__ for handler in handlers]),
        ("Redactor mode", redactor_mode),
    ]
    if flight_recorder:
        diagnostics.append(
            (
                "Flight recorder",
                f"path={log_path or '<none>'}, capacity={flight_capacity}, "
                f"flush_on_close={force_flush_fr}",
            )
        )
    diagnostics.append(("Per-logger overrides", _level_names(logger_levels) or "<none>"))

    for label, value in diagnostics:
        logger.debug("%s: %s", label, value)
