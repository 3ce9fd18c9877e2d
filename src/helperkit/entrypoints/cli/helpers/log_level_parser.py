"""Parsing of the ``-L NAME=LEVEL`` option.

Values may be repeated or given as one comma/space-separated string (as in
``HELPERKIT_LOGGER_LEVEL``). Each item sets the minimum level of one logger.
"""

import logging
import re

import click

# httpx logs every request at INFO
DEFAULT_LIB_LEVELS = {"httpx": logging.WARNING, "httpcore": logging.WARNING}

_ITEM_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten the raw option value into non-empty ``NAME=LEVEL`` items."""
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for chunk in chunks:
        items.extend(item for item in _ITEM_SEPARATORS.split(chunk) if item)
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name -> level mapping.

    The result starts from :data:`DEFAULT_LIB_LEVELS`; later items override
    earlier ones.

    Raises:
        click.BadParameter: If an item has no ``=`` or names an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_name.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
