# tests/test_dates.py

from __future__ import annotations

from datetime import date

import pytest

from gedcom_validator.core.exceptions import DateFormatError
from gedcom_validator.dates import add_months, diff_days, diff_months, format_date, get_age, parse_date


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("14 FEB 1980", date(1980, 2, 14)),
        ("14 feb 1980", date(1980, 2, 14)),
        ("FEB 14, 1980", date(1980, 2, 14)),
        ("FEB 14 1980", date(1980, 2, 14)),
        ("3 SEPT 1975", date(1975, 9, 3)),
        ("FEB 1980", date(1980, 2, 1)),
        ("1980", date(1980, 1, 1)),
        ("1980-02-14", date(1980, 2, 14)),
        ("  9 SEP 1975 ", date(1975, 9, 9)),
    ],
)
def test_parse_date_shapes(raw, expected):
    assert parse_date(raw) == expected


@pytest.mark.parametrize("raw", ["", "hello", "31 FEB 1900", "14 FOO 1980", "ABT 1900", "1 2 3 4"])
def test_parse_date_rejects(raw):
    with pytest.raises(DateFormatError):
        parse_date(raw)


def test_format_date():
    assert format_date(date(1960, 7, 15)) == "1960-07-15"
    assert format_date(None) == "NA"


def test_get_age_counts_birthday():
    birth = date(1960, 7, 15)
    assert get_age(birth, date(2020, 7, 14)) == 59
    assert get_age(birth, date(2020, 7, 15)) == 60


def test_get_age_defaults_to_today():
    birth = date(2000, 1, 1)
    assert get_age(birth) == get_age(birth, date.today())


def test_diff_days_is_order_insensitive():
    assert diff_days(date(2020, 1, 1), date(2020, 1, 3)) == 2
    assert diff_days(date(2020, 1, 3), date(2020, 1, 1)) == 2


def test_diff_months():
    assert diff_months(date(2020, 1, 15), date(2020, 9, 15)) == 8
    assert diff_months(date(2020, 1, 15), date(2020, 9, 14)) == 7
    assert diff_months(date(2020, 9, 14), date(2020, 1, 15)) == 7
    assert diff_months(date(2020, 1, 31), date(2020, 2, 29)) == 0


def test_add_months_clamps_day():
    assert add_months(date(2020, 1, 31), 1) == date(2020, 2, 29)
    assert add_months(date(2019, 11, 30), 3) == date(2020, 2, 29)
    assert add_months(date(2020, 5, 10), -5) == date(2019, 12, 10)
