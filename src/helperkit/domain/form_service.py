"""Parsing of raw form input into typed values.

Form values arrive as strings (or lists of strings) and may be missing. The
``parse_*`` helpers return None instead of raising when a value cannot be
used, so callers can fall back to a default or report a violation.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

from bs4 import BeautifulSoup

from helperkit.domain.arrays import arr
from helperkit.domain.text import to_snake_case
from helperkit.domain.validation import Violation

E = TypeVar("E", bound=Enum)

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off", "")
DANGEROUS_TAGS = ("script", "style", "iframe", "object", "embed")
BASIC_FORMATTING_TAGS = ("b", "i", "u", "em", "strong", "br", "p")


def trim(value: str | None, delete_zero: bool = True, return_none_if_empty: bool = False) -> str | None:
    """Strip surrounding whitespace, and NUL bytes unless ``delete_zero`` is False."""
    if value is None:
        return None
    trimmed = value.strip(" \t\n\r\v\0" if delete_zero else " \t\n\r\v")
    if return_none_if_empty and trimmed == "":
        return None
    return trimmed


def _is_empty(value: Any) -> bool:
    return not value or value == "0"


def parse_array(
    value: Any, filter_empty: bool = True, separator: str | None = ",", max_size: int = 10000
) -> list:
    """Turn a form value into a list.

    Strings are split on ``separator``; other scalars become one-item lists.

    Raises:
        ValueError: If the list holds more than ``max_size`` items.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = list(value)
    elif isinstance(value, str) and separator is not None:
        items = value.split(separator)
    else:
        items = [value]

    if 0 < max_size < len(items):
        raise ValueError(f"Array size ({len(items)}) exceeds maximum allowed size ({max_size})")
    return [item for item in items if not _is_empty(item)] if filter_empty else items


def parse_boolean(value: Any) -> bool | None:
    """``"yes"``/``"on"``/``"1"`` -> True, ``"no"``/``"off"``/``"0"``/``""`` -> False."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, int):
        return {0: False, 1: True}.get(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    return None


def _to_number(value: Any) -> float | int | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _in_range(number: float, min_value: float | None, max_value: float | None) -> bool:
    if min_value is not None and number < min_value:
        return False
    return max_value is None or number <= max_value


def parse_integer(value: Any, min_value: int | None = None, max_value: int | None = None) -> int | None:
    """Numeric input truncated to an int; None when missing or out of range."""
    number = _to_number(value)
    if number is None:
        return None
    number = int(number)
    return number if _in_range(number, min_value, max_value) else None


def parse_float(
    value: Any, min_value: float | None = None, max_value: float | None = None
) -> float | None:
    number = _to_number(value)
    if number is None:
        return None
    number = float(number)
    return number if _in_range(number, min_value, max_value) else None


def sanitize_html(value: str | None, allow_basic_formatting: bool = False) -> str | None:
    """Remove markup from user input.

    Script, style and embedded-object blocks are dropped with their content.
    Other tags are unwrapped, keeping their text; with
    ``allow_basic_formatting``, ``b``, ``i``, ``u``, ``em``, ``strong``,
    ``br`` and ``p`` are kept.
    """
    if value is None:
        return None
    soup = BeautifulSoup(value, "html.parser")
    for tag in soup.find_all(DANGEROUS_TAGS):
        tag.decompose()

    if not allow_basic_formatting:
        return soup.get_text()

    for tag in soup.find_all(True):
        if tag.name not in BASIC_FORMATTING_TAGS:
            tag.unwrap()
    return str(soup)


def parse_enum(enum_cls: type[E], value: str | None, upper_case: bool = True) -> E | None:
    """Look ``value`` up by enum value, after upper-casing (or lower-casing) it.

    Raises:
        TypeError: If ``enum_cls`` is not an Enum.
    """
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise TypeError(f'Class "{enum_cls!r}" is not a valid Enum')
    if value is None:
        return None
    try:
        return enum_cls(value.upper() if upper_case else value.lower())
    except ValueError:
        return None


def parse_enum_list(
    value: Any,
    enum_cls: type[E],
    allowed_values: Iterable[E] | None = None,
    parse_function: Callable[[Any], E | None] | None = None,
    separator: str | None = ",",
) -> list[E]:
    """Parse a list (or separated string) of enum values, dropping unknown ones."""
    items = parse_array(value, separator=separator)
    if parse_function is not None:
        members = arr.parse_list_by_callback(items, parse_function)
    else:
        members = arr.parse_enum_list(items, enum_cls)
    if allowed_values is not None:
        allowed = list(allowed_values)
        members = [member for member in members if member in allowed]
    return members


def _error_key(property_path: str) -> str:
    head, dot, tail = property_path.partition(".")
    return to_snake_case(head) + dot + tail


def get_error_messages(
    violations: Iterable[Violation] | None,
    other_errors: Mapping[str, str | tuple[str, str]] | None = None,
) -> dict[str, str]:
    """Map each field to its error message, keyed in snake_case.

    ``firstName`` becomes ``first_name``; for nested paths such as
    ``address.zipCode`` only the first segment is converted. Entries of
    ``other_errors`` may be a message or a ``(key, message)`` pair.
    """
    messages = {}
    for violation in violations or []:
        messages[_error_key(violation.property_path)] = violation.message
    for key, error in (other_errors or {}).items():
        messages[key] = error[1] if isinstance(error, tuple) else error
    return messages
