"""SQL ``DATE`` strings (``YYYY-MM-DD``)."""

from __future__ import annotations

import calendar
import re
from datetime import date, timedelta
from typing import Any

_SQL_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})\Z")


def parse(value: str | dict[str, Any] | None) -> str | None:
    """Normalise user input to ``YYYY-MM-DD``.

    Accepts ISO dates, ``dd/mm/yyyy`` and dicts carrying a ``date`` key (as
    produced by serialised datetimes). Anything else, including impossible
    dates such as ``2024-02-30``, gives None.
    """
    if not value:
        return None
    if isinstance(value, dict):
        if not value.get("date"):
            return None
        value = str(value["date"])[:10]

    value = value.strip()
    if "/" in value:
        parts = value.split("/")
        if len(parts) != 3:
            return None
        value = f"{parts[2]}-{parts[1]}-{parts[0]}"

    match = _SQL_DATE.match(value)
    if not match:
        return None
    year, month, day = (int(group) for group in match.groups())
    if not _is_valid(year, month, day):
        return None
    return get(year, month, day)


def _is_valid(year: int, month: int, day: int) -> bool:
    return 1 <= year <= 9999 and 1 <= month <= 12 and 1 <= day <= calendar.monthrange(year, month)[1]


def check(value: str | None) -> bool:
    """True when ``value`` is an existing ``YYYY-MM-DD`` date."""
    if not value:
        return False
    parts = value.split("-")
    if len(parts) != 3:
        return False
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        return False
    return _is_valid(year, month, day)


def get_year(sql_date: str) -> int:
    return date.fromisoformat(sql_date[:10]).year


def get_month(sql_date: str) -> int:
    return date.fromisoformat(sql_date[:10]).month


def get_day(sql_date: str) -> int:
    return date.fromisoformat(sql_date[:10]).day


def get(year: int, month: int, day: int) -> str:
    return f"{year}-{month:02d}-{day:02d}"


def get_first_day_of_week(year: int, week: int) -> str:
    """Monday of ISO week ``week`` of ``year``."""
    return date.fromisocalendar(year, week, 1).isoformat()


def get_last_day_of_week(year: int, week: int) -> str:
    """Sunday of ISO week ``week`` of ``year``."""
    return (date.fromisocalendar(year, week, 1) + timedelta(days=6)).isoformat()


def get_first_day_of_month(year: int, month: int) -> str:
    return date(year, month, 1).isoformat()


def get_last_day_of_month(year: int, month: int) -> str:
    return date(year, month, calendar.monthrange(year, month)[1]).isoformat()
