"""Unit tests for helperkit.domain.calendar.sql_date."""

import pytest

from helperkit.domain.calendar import sql_date


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-15", "2024-01-15"),
        ("2024-1-5", "2024-01-05"),
        (" 2024-01-15 ", "2024-01-15"),
        ("15/01/2024", "2024-01-15"),
        ({"date": "2024-01-15 10:00:00.000000"}, "2024-01-15"),
        ("2024-02-30", None),
        ("2023-02-29", None),
        ("15/01", None),
        ("January 15", None),
        ({"timezone": "UTC"}, None),
        ("", None),
        (None, None),
    ],
)
def test_parse(value, expected):
    assert sql_date.parse(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-02-29", True),
        ("2023-02-29", False),
        ("2024-13-01", False),
        ("2024-00-10", False),
        ("2024-01", False),
        ("abcd-ef-gh", False),
        (None, False),
    ],
)
def test_check(value, expected):
    assert sql_date.check(value) is expected


def test_components():
    assert sql_date.get_year("2024-03-15") == 2024
    assert sql_date.get_month("2024-03-15 10:00:00") == 3
    assert sql_date.get_day("2024-03-15") == 15
    assert sql_date.get(2024, 3, 5) == "2024-03-05"


def test_week_bounds_follow_iso_weeks():
    assert sql_date.get_first_day_of_week(2024, 1) == "2024-01-01"
    assert sql_date.get_last_day_of_week(2024, 1) == "2024-01-07"
    assert sql_date.get_first_day_of_week(2021, 1) == "2021-01-04"


def test_month_bounds():
    assert sql_date.get_first_day_of_month(2024, 2) == "2024-02-01"
    assert sql_date.get_last_day_of_month(2024, 2) == "2024-02-29"
    assert sql_date.get_last_day_of_month(2023, 2) == "2023-02-28"
