"""Times of day typed by users (``14:30``, ``2h30``, ``14:30:15``)."""

from __future__ import annotations

import re
from datetime import time

_ALPHA_SEPARATED = re.compile(r"\d+[a-zA-Z]+\d+")
_DIGITS = re.compile(r"\d+")


def _parse(
    entered_time: str | None,
    separator: str = ":",
    hour_pos: int = 1,
    minute_pos: int = 2,
    second_pos: int = 3,
) -> tuple[int, int, int] | None:
    if not entered_time:
        return None

    if _ALPHA_SEPARATED.search(entered_time):
        parts = _DIGITS.findall(entered_time)
    else:
        parts = entered_time.split(separator)

    def component(position: int, required: bool) -> int:
        index = position - 1
        if index >= len(parts):
            if required:
                raise ValueError(f"missing component at position {position}")
            return 0
        return int(parts[index])

    try:
        hour = component(hour_pos, True)
        minute = component(minute_pos, True)
        second = component(second_pos, False)
    except ValueError:
        return None

    if not check(hour, minute, second):
        return None
    return hour, minute, second


def parse(
    entered_time: str | None,
    separator: str = ":",
    hour_pos: int = 1,
    minute_pos: int = 2,
    second_pos: int = 3,
) -> time | None:
    """Parse a time of day; positions are 1-based indexes into the split text.

    When letters separate the digits (``10h30``, ``2h30m15``) the separator is
    ignored and the digit groups are used instead. Seconds are optional.
    """
    components = _parse(entered_time, separator, hour_pos, minute_pos, second_pos)
    if components is None:
        return None
    return time(*components)


def parse_to_sql_time(
    entered_time: str | None,
    separator: str = ":",
    hour_pos: int = 1,
    minute_pos: int = 2,
    second_pos: int = 3,
) -> str | None:
    parsed = parse(entered_time, separator, hour_pos, minute_pos, second_pos)
    return parsed.strftime("%H:%M:%S") if parsed is not None else None


def check(hour: int, minute: int, second: int = 0) -> bool:
    return 0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60


def check_value(
    entered_time: str | None,
    separator: str = ":",
    hour_pos: int = 1,
    minute_pos: int = 2,
    second_pos: int = 3,
) -> bool:
    return _parse(entered_time, separator, hour_pos, minute_pos, second_pos) is not None


def format_hour(hour: int) -> str:
    """``format_hour(8)`` -> ``"08h"``."""
    return f"{hour:02d}h"


def format_duration(seconds: int, short: bool = False) -> str:
    """``3723`` -> ``"1h 2m 3s"``, or ``"01:02:03"`` with ``short``.

    Zero components are left out of the long form, except that a zero
    duration still reads ``"0s"``.
    """
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if short:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)
