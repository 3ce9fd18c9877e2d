"""Datetime construction, formatting, arithmetic and calendar queries.

Every function returns a new object; inputs are never modified. Naive
datetimes are treated as UTC wherever a time zone conversion is involved.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta

import pytz
from dateutil import parser
from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from . import date as calendar_date

logger = logging.getLogger(__name__)

_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)


# ============================================================================
#                           Construction
# ============================================================================


def now() -> datetime:
    return datetime.now()


def create(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> datetime | None:
    """Build a datetime, or None when the components are out of range."""
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError:
        return None


def create_date(year: int, month: int, day: int) -> datetime | None:
    return create(year, month, day)


def create_time(hour: int, minute: int = 0, second: int = 0) -> datetime | None:
    """Today at the given time of day."""
    today = date.today()
    return create(today.year, today.month, today.day, hour, minute, second)


def parse(value: str | None) -> datetime | None:
    """Parse free-form text with ``dateutil``; None when it is not a date."""
    if not value:
        return None
    try:
        return parser.parse(value)
    except (ValueError, OverflowError) as exc:
        logger.debug("Could not parse %r as a datetime: %s", value, exc)
        return None


def parse_from_sql_date_time(value: str | None) -> datetime | None:
    """``"2024-01-15 14:30:00"`` (or ``T`` separated) -> datetime."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def parse_from_timestamp(timestamp: float) -> datetime | None:
    """Local datetime for a Unix timestamp."""
    try:
        return datetime.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError):
        return None


# ============================================================================
#                           Formatting
# ============================================================================


def format_date_iso(value: datetime | date) -> str:
    return value.strftime("%Y-%m-%d")


def format_time_iso(value: datetime | time) -> str:
    return value.strftime("%H:%M:%S")


def format_date_short(
    value: datetime | date, locale: str | None = None, separator: str | None = None
) -> str:
    """``fr``: ``15/01/2024``; ``en``: ``01/15/2024``."""
    fmt = "%d/%m/%Y" if calendar_date.get_language(locale) == "fr" else "%m/%d/%Y"
    formatted = value.strftime(fmt)
    return formatted.replace("/", separator) if separator is not None else formatted


def format_date_long(value: datetime | date, locale: str | None = None) -> str:
    """``fr``: ``15 janvier 2024``; ``en``: ``January 15, 2024``."""
    language = calendar_date.get_language(locale)
    month = calendar_date.MONTH_NAMES[language][value.month - 1]
    if language == "fr":
        return f"{value.day} {month} {value.year}"
    return f"{month} {value.day}, {value.year}"


def format_date_full(value: datetime | date, locale: str | None = None) -> str:
    """Long format prefixed with the day name: ``lundi 15 janvier 2024``."""
    language = calendar_date.get_language(locale)
    day_name = calendar_date.DAY_NAMES[language][value.isoweekday() - 1]
    separator = " " if language == "fr" else ", "
    return f"{day_name}{separator}{format_date_long(value, language)}"


def format_date_in_long(
    value: datetime | date, locale: str | None = None, with_week_day: bool = False
) -> str:
    return format_date_full(value, locale) if with_week_day else format_date_long(value, locale)


# ============================================================================
#                           Time zones
# ============================================================================


def convert_to_timezone(value: datetime, timezone: str) -> datetime:
    """Express ``value`` in ``timezone`` (an IANA name such as ``Europe/Paris``)."""
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(pytz.timezone(timezone))


def convert_to_utc(value: datetime) -> datetime:
    return convert_to_timezone(value, "UTC")


def get_utc_sql_date(value: datetime | None) -> str | None:
    return convert_to_utc(value).strftime("%Y-%m-%d") if value is not None else None


def get_utc_sql_time(value: datetime | None) -> str | None:
    return convert_to_utc(value).strftime("%H:%M:%S") if value is not None else None


def get_utc_sql_date_time(value: datetime | None) -> str | None:
    return convert_to_utc(value).strftime("%Y-%m-%d %H:%M:%S") if value is not None else None


# ============================================================================
#                           Arithmetic
# ============================================================================


def add_days(value: datetime, days: int) -> datetime:
    return value + timedelta(days=days)


def sub_days(value: datetime, days: int) -> datetime:
    return value - timedelta(days=days)


def add_months(value: datetime, months: int) -> datetime:
    """Calendar months; the day is clamped to the end of shorter months."""
    return value + relativedelta(months=months)


def sub_months(value: datetime, months: int) -> datetime:
    return value - relativedelta(months=months)


def add_years(value: datetime, years: int) -> datetime:
    return value + relativedelta(years=years)


def sub_years(value: datetime, years: int) -> datetime:
    return value - relativedelta(years=years)


def add_hours(value: datetime, hours: int) -> datetime:
    return value + timedelta(hours=hours)


def sub_hours(value: datetime, hours: int) -> datetime:
    return value - timedelta(hours=hours)


def add_minutes(value: datetime, minutes: int) -> datetime:
    return value + timedelta(minutes=minutes)


def sub_minutes(value: datetime, minutes: int) -> datetime:
    return value - timedelta(minutes=minutes)


def add_seconds(value: datetime, seconds: int) -> datetime:
    return value + timedelta(seconds=seconds)


def sub_seconds(value: datetime, seconds: int) -> datetime:
    return value - timedelta(seconds=seconds)


# ============================================================================
#                           Rounding
# ============================================================================


def floor_to_hour(value: datetime) -> datetime:
    return value.replace(minute=0, second=0, microsecond=0)


def ceil_to_hour(value: datetime) -> datetime:
    """Next full hour, unless ``value`` already sits on one."""
    floored = floor_to_hour(value)
    if value != floored:
        return floored + timedelta(hours=1)
    return floored


def round_to_hour(value: datetime) -> datetime:
    return ceil_to_hour(value) if value.minute >= 30 else floor_to_hour(value)


def floor_to_minutes(value: datetime, minutes: int = 1) -> datetime:
    """Round down to a multiple of ``minutes`` (``15`` for quarter hours)."""
    minutes = max(minutes, 1)
    return value.replace(minute=value.minute - value.minute % minutes, second=0, microsecond=0)


def ceil_to_minutes(value: datetime, minutes: int = 1) -> datetime:
    """Round up to a multiple of ``minutes``, rolling over into the next hour."""
    minutes = max(minutes, 1)
    floored = floor_to_minutes(value, minutes)
    if value == floored:
        return floored
    ceiled = floored.minute + minutes
    if ceiled >= 60:
        return floor_to_hour(value) + timedelta(hours=1)
    return floored.replace(minute=ceiled)


# ============================================================================
#                           Comparisons
# ============================================================================


def _now_like(value: datetime) -> datetime:
    return datetime.now(value.tzinfo) if value.tzinfo is not None else datetime.now()


def is_in_the_past(value: datetime) -> bool:
    return value < _now_like(value)


def is_in_the_future(value: datetime) -> bool:
    return value > _now_like(value)


def is_same_day(value1: datetime | date, value2: datetime | date) -> bool:
    return (value1.year, value1.month, value1.day) == (value2.year, value2.month, value2.day)


def is_today(value: datetime | date) -> bool:
    return is_same_day(value, date.today())


def is_between(value: datetime, start: datetime, end: datetime, inclusive: bool = True) -> bool:
    if inclusive:
        return start <= value <= end
    return start < value < end


def is_date_after(value1: datetime | date, value2: datetime | date) -> bool:
    """Compare the calendar dates only, ignoring the time of day."""
    return (value1.year, value1.month, value1.day) > (value2.year, value2.month, value2.day)


def is_date_before(value1: datetime | date, value2: datetime | date) -> bool:
    return (value1.year, value1.month, value1.day) < (value2.year, value2.month, value2.day)


# ============================================================================
#                           Days and weeks
# ============================================================================


def get_day_of_week(value: datetime | date) -> int:
    """ISO day of the week, 1 (Monday) to 7 (Sunday)."""
    return value.isoweekday()


def is_weekend(value: datetime | date) -> bool:
    return value.isoweekday() >= 6


def is_weekday(value: datetime | date) -> bool:
    return not is_weekend(value)


def get_next_week_day(value: datetime, week_day: int) -> datetime:
    """``value`` itself when it already falls on ``week_day``."""
    return value + relativedelta(weekday=_WEEKDAYS[week_day - 1](+1))


def get_previous_week_day(value: datetime, week_day: int) -> datetime:
    return value + relativedelta(weekday=_WEEKDAYS[week_day - 1](-1))


def get_week_number(value: datetime | date) -> tuple[int, int]:
    """``(iso_year, iso_week)``; 30 December 2024 is ``(2025, 1)``."""
    iso = value.isocalendar()
    return iso.year, iso.week


def get_first_day_of_week(year: int, week: int) -> datetime:
    """Monday, midnight, of ISO week ``week`` of ``year``."""
    return datetime.combine(date.fromisocalendar(year, week, 1), time())


def get_last_day_of_week(year: int, week: int) -> datetime:
    return get_first_day_of_week(year, week) + timedelta(days=6)


def get_first_day_of_week_of_date(value: datetime | date) -> datetime:
    iso = value.isocalendar()
    return get_first_day_of_week(iso.year, iso.week)


def get_last_day_of_week_of_date(value: datetime | date) -> datetime:
    return get_first_day_of_week_of_date(value) + timedelta(days=6)


def get_first_day_of_month(year: int, month: int) -> datetime:
    return datetime(year, month, 1)


def get_last_day_of_month(year: int, month: int) -> datetime:
    return datetime(year, month, calendar_date.get_number_of_days_in_month(year, month))


def get_week_day_of_month(year: int, month: int, week_day: int, number: int) -> datetime | None:
    """The ``number``-th ``week_day`` of a month: the 2nd Wednesday is ``(3, 2)``.

    Returns None for a week day outside 1..7, a rank outside 1..5, or a
    5th occurrence the month does not have.
    """
    if not 1 <= week_day <= 7 or not 1 <= number <= 5:
        return None
    result = datetime(year, month, 1) + relativedelta(weekday=_WEEKDAYS[week_day - 1](number))
    if result.month != month:
        return None
    return result


def get_last_week_day_of_month(year: int, month: int, week_day: int) -> datetime | None:
    if not 1 <= week_day <= 7:
        return None
    return get_last_day_of_month(year, month) + relativedelta(weekday=_WEEKDAYS[week_day - 1](-1))


# ============================================================================
#                           Ages and durations
# ============================================================================


def calculate_age(birth_date: datetime | date, today: datetime | date | None = None) -> int:
    """Completed years between ``birth_date`` and ``today`` (now by default)."""
    today = today or date.today()
    return relativedelta(_as_date(today), _as_date(birth_date)).years


def _as_date(value: datetime | date) -> date:
    return value.date() if isinstance(value, datetime) else value


def get_hours_between(start: datetime, end: datetime, absolute: bool = True) -> float:
    return get_seconds_between(start, end, absolute) / 3600


def get_minutes_between(start: datetime, end: datetime, absolute: bool = True) -> float:
    return get_seconds_between(start, end, absolute) / 60


def get_seconds_between(start: datetime, end: datetime, absolute: bool = True) -> float:
    seconds = (end - start).total_seconds()
    return abs(seconds) if absolute else seconds


# ============================================================================
#                           Business days
# ============================================================================


def get_business_days(start: datetime | date, end: datetime | date) -> int:
    """Monday-to-Friday days between two dates, both ends included.

    Public holidays are not taken into account. The order of the bounds does
    not matter.
    """
    first, last = _as_date(start), _as_date(end)
    if first > last:
        first, last = last, first
    return sum(
        1 for offset in range((last - first).days + 1) if is_weekday(first + timedelta(days=offset))
    )


def add_business_days(value: datetime, business_days: int) -> datetime:
    result = value
    while business_days > 0:
        result += timedelta(days=1)
        if is_weekday(result):
            business_days -= 1
    return result


def sub_business_days(value: datetime, business_days: int) -> datetime:
    result = value
    while business_days > 0:
        result -= timedelta(days=1)
        if is_weekday(result):
            business_days -= 1
    return result
