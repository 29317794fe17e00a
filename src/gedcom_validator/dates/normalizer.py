# src/gedcom_validator/dates/normalizer.py

from __future__ import annotations

from datetime import date
from typing import List, Optional

from gedcom_validator.core.exceptions import DateFormatError


# ---------------------------------------------------------------------------
# Month helpers
# ---------------------------------------------------------------------------

MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "SEPT": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

NOT_AVAILABLE = "NA"


# ---------------------------------------------------------------------------
# Core parsing helpers
# ---------------------------------------------------------------------------

def _parse_year(token: str) -> Optional[int]:
    token = token.strip()
    if len(token) == 4 and token.isdigit():
        return int(token)
    # allow 3-digit "year" for deep history
    if len(token) == 3 and token.isdigit():
        return int(token)
    return None


def _parse_day(token: str) -> Optional[int]:
    if token.isdigit() and 1 <= len(token) <= 2:
        return int(token)
    return None


def _build(year: Optional[int], month: Optional[int], day: Optional[int]) -> Optional[date]:
    if year is None or month is None or day is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        # e.g. 31 FEB 1900
        return None


def _from_tokens(tokens: List[str]) -> Optional[date]:
    """
    Supports:
        - '1900'          -> 1900-01-01
        - 'JAN 1900'      -> 1900-01-01
        - '1 JAN 1900'    -> 1900-01-01
        - 'JAN 1 1900'    -> 1900-01-01 (commas already removed)
    """
    if len(tokens) == 1:
        return _build(_parse_year(tokens[0]), 1, 1)

    if len(tokens) == 2:
        mon_token, year_token = tokens
        return _build(_parse_year(year_token), MONTHS.get(mon_token.upper()), 1)

    if len(tokens) == 3:
        first, second, year_token = tokens
        year = _parse_year(year_token)
        if first.upper() in MONTHS:
            return _build(year, MONTHS[first.upper()], _parse_day(second))
        return _build(year, MONTHS.get(second.upper()), _parse_day(first))

    return None


# ---------------------------------------------------------------------------
# Main public API
# ---------------------------------------------------------------------------

def parse_date(raw: Optional[str]) -> date:
    """
    Parse a DATE argument into a ``datetime.date``.

    Accepted shapes:
        - '14 FEB 1980'   day precision
        - 'FEB 14, 1980'  month-first, comma tolerated
        - 'FEB 1980'      first day of the month
        - '1980'          first of January
        - '1980-02-14'    ISO 8601

    Raises:
        DateFormatError: with the offending text when nothing matches.
    """
    s = "" if raw is None else str(raw).strip()

    if s:
        try:
            return date.fromisoformat(s)
        except ValueError:
            pass

        tokens = [t for t in s.replace(",", " ").split() if t]
        parsed = _from_tokens(tokens)
        if parsed is not None:
            return parsed

    raise DateFormatError(f"Date is not valid: {s}")


def format_date(value: Optional[date]) -> str:
    """Render a date for messages and tables; ``NA`` when absent."""
    if value is None:
        return NOT_AVAILABLE
    return value.isoformat()
