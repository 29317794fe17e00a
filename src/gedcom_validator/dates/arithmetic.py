# src/gedcom_validator/dates/arithmetic.py

from __future__ import annotations

import calendar
from datetime import date
from typing import Optional


def get_age(birth: date, ref: Optional[date] = None) -> int:
    """
    Calendar-correct age in whole years.

    Counts to ``ref`` (a death date, a marriage date, ...) or to today.
    The year difference drops by one while the reference month/day still
    precedes the birthday.
    """
    ref = ref or date.today()
    age = ref.year - birth.year
    if (ref.month, ref.day) < (birth.month, birth.day):
        age -= 1
    return age


def diff_days(first: date, second: Optional[date] = None) -> int:
    """Absolute number of whole days between two dates."""
    second = second or date.today()
    return abs((second - first).days)


def diff_months(first: date, second: Optional[date] = None) -> int:
    """
    Whole months between two dates, order insensitive.

    The count drops by one while the later day-of-month precedes the
    earlier one (Jan 31 -> Feb 28 is zero months).
    """
    second = second or date.today()
    if second < first:
        first, second = second, first

    months = (second.year - first.year) * 12 + (second.month - first.month)
    if second.day < first.day:
        months -= 1
    return months


def add_months(value: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month length."""
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
