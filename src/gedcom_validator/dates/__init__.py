from .arithmetic import add_months, diff_days, diff_months, get_age
from .normalizer import MONTHS, format_date, parse_date

__all__ = [
    "MONTHS",
    "add_months",
    "diff_days",
    "diff_months",
    "format_date",
    "get_age",
    "parse_date",
]
