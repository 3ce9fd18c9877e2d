"""Calendar dates: lenient parsing and localised day and month names.

Only ``fr`` and ``en`` names are bundled; any other locale falls back to
English. Day numbers follow ISO 8601 (1 is Monday, 7 is Sunday).
"""

from __future__ import annotations

import calendar
from datetime import date, datetime

from . import sql_date

DAY_NAMES = {
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "fr": ("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
}
MONTH_NAMES = {
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "fr": (
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
}  # fmt: skip


def get_language(locale: str | None) -> str:
    language = (locale or "en")[:2].lower()
    return language if language in DAY_NAMES else "en"


def parse(value: str | None) -> datetime | None:
    """Parse the date formats users and exports commonly produce.

    Recognised, in order:
        - ``YYYY-mm-ddTHH:ii:ss`` (or with a space instead of ``T``)
        - ``YYYYMMDD``
        - ``YYYYmmddHHiiss``
        - ``YYYY-MM-DD`` and ``dd/mm/yyyy`` (midnight)

    Returns:
        datetime | None: A naive datetime, or None when nothing matches.
    """
    if not value:
        return None

    if len(value) == len("YYYY-mm-ddTHH:ii:ss"):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            pass

    if value.isdigit() and len(value) in (8, 14):
        fmt = "%Y%m%d" if len(value) == 8 else "%Y%m%d%H%M%S"
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            return None

    parsed = sql_date.parse(value)
    if parsed is None:
        return None
    return datetime.fromisoformat(parsed)


def get_day_name(day_of_week: int, locale: str | None = None) -> str:
    """``get_day_name(1, "fr")`` -> ``"Lundi"``."""
    return DAY_NAMES[get_language(locale)][day_of_week - 1].capitalize()


def get_day_name_short(day_of_week: int, locale: str | None = None) -> str:
    return get_day_name(day_of_week, locale)[:3]


def get_month_name(month: int, locale: str | None = None) -> str:
    """``get_month_name(8, "fr")`` -> ``"Août"``."""
    return MONTH_NAMES[get_language(locale)][month - 1].capitalize()


def get_month_name_short(month: int, locale: str | None = None) -> str:
    return get_month_name(month, locale)[:3]


def get_months_in_year(locale: str | None = None) -> dict[int, str]:
    return {month: get_month_name(month, locale) for month in range(1, 13)}


def get_number_of_days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def get_days_in_month(year: int, month: int) -> list[date]:
    return [date(year, month, day) for day in range(1, get_number_of_days_in_month(year, month) + 1)]


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def get_number_of_days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def get_weeks_in_year(year: int) -> int:
    """Number of ISO weeks in ``year`` (52 or 53)."""
    # 28 December always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar().week


def is_valid(value: str | None) -> bool:
    return parse(value) is not None


def is_valid_date(year: int, month: int, day: int) -> bool:
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True
