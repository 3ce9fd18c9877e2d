"""Unit tests for helperkit.domain.calendar.time."""

from datetime import time

import pytest

from helperkit.domain.calendar import time as calendar_time


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("14:30", time(14, 30)),
        ("14:30:15", time(14, 30, 15)),
        ("10h30", time(10, 30)),
        ("2h30m15", time(2, 30, 15)),
        ("25:00", None),
        ("12:75", None),
        ("14", None),
        ("ab:cd", None),
        ("", None),
        (None, None),
    ],
)
def test_parse(value, expected):
    assert calendar_time.parse(value) == expected


def test_parse_with_custom_separator_and_positions():
    assert calendar_time.parse("30.14", separator=".", hour_pos=2, minute_pos=1) == time(14, 30)


def test_parse_to_sql_time():
    assert calendar_time.parse_to_sql_time("9:05") == "09:05:00"
    assert calendar_time.parse_to_sql_time("nope") is None


def test_check():
    assert calendar_time.check(23, 59, 59)
    assert not calendar_time.check(24, 0)
    assert not calendar_time.check(12, 60)
    assert not calendar_time.check(12, 0, 60)
    assert calendar_time.check_value("12:00")
    assert not calendar_time.check_value("12h")


def test_format_hour():
    assert calendar_time.format_hour(8) == "08h"
    assert calendar_time.format_hour(14) == "14h"


@pytest.mark.parametrize(
    ("seconds", "short", "expected"),
    [
        (3723, False, "1h 2m 3s"),
        (3600, False, "1h"),
        (61, False, "1m 1s"),
        (0, False, "0s"),
        (3723, True, "01:02:03"),
        (0, True, "00:00:00"),
    ],
)
def test_format_duration(seconds, short, expected):
    assert calendar_time.format_duration(seconds, short) == expected
