"""SQL ``TIME`` strings (``HH:MM:SS``)."""

from __future__ import annotations

from datetime import datetime
from typing import Any


def parse(value: str | dict[str, Any] | None) -> str | None:
    """Return ``value`` as ``HH:MM:SS``; ``HH:MM`` gets ``:00`` appended.

    A dict with a ``date`` key (``"2024-01-15 14:30:00"``) yields its time part.
    """
    if isinstance(value, dict):
        if not value.get("date"):
            return None
        value = str(value["date"])[11:19]
    if not value:
        return None
    if len(value) == 5:
        value += ":00"
    return value


def _components(sql_time: str) -> tuple[int, int, int]:
    parts = [int(part) for part in sql_time.split(":")]
    parts += [0] * (3 - len(parts))
    return parts[0], parts[1], parts[2]


def check(value: str | None) -> bool:
    """Hour in 0..23 and minute in 0..59; seconds are not checked."""
    if not value:
        return False
    parts = value.split(":")
    if len(parts) < 2:
        return False
    try:
        hour, minute = int(parts[0]), int(parts[1])
    except ValueError:
        return False
    return 0 <= hour < 24 and 0 <= minute < 60


def get_hour(sql_time: str) -> int:
    return _components(sql_time)[0]


def get_minute(sql_time: str) -> int:
    return _components(sql_time)[1]


def get_second(sql_time: str) -> int:
    return _components(sql_time)[2]


def get(hour: int, minute: int, second: int = 0) -> str:
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def _to_seconds(sql_time: str) -> int:
    hour, minute, second = _components(sql_time)
    return hour * 3600 + minute * 60 + second


def get_nb_seconds_from_time(sql_time1: str, sql_time2: str) -> int:
    """Seconds from ``sql_time2`` to ``sql_time1``; negative when the first is earlier."""
    return _to_seconds(sql_time1) - _to_seconds(sql_time2)


def get_nb_seconds_from_now(sql_time: str) -> int:
    return get_nb_seconds_from_time(sql_time, datetime.now().strftime("%H:%M:%S"))


def is_before_time(sql_time1: str, sql_time2: str) -> bool:
    return get_nb_seconds_from_time(sql_time1, sql_time2) < 0


def is_after_time(sql_time1: str, sql_time2: str) -> bool:
    return get_nb_seconds_from_time(sql_time1, sql_time2) > 0


def is_before_now(sql_time: str) -> bool:
    return get_nb_seconds_from_now(sql_time) < 0


def is_after_now(sql_time: str) -> bool:
    return get_nb_seconds_from_now(sql_time) > 0
