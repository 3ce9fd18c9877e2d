"""Date and time helpers built on ``python-dateutil`` and ``pytz``."""

from . import date, date_time, sql_date, sql_time, time, timezone

__all__ = ["date", "date_time", "sql_date", "sql_time", "time", "timezone"]
