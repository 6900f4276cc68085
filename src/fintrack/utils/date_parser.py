"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Callable

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def _week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def _month_start(day: date) -> date:
    return day.replace(day=1)


def _year_start(day: date) -> date:
    return day.replace(month=1, day=1)


_KEYWORDS: dict[str, Callable[[date], date]] = {
    "today": lambda today: today,
    "yesterday": lambda today: today - timedelta(days=1),
    "this week": _week_start,
    "this month": _month_start,
    "this year": _year_start,
    "last week": lambda today: _week_start(today) - timedelta(days=7),
    "last month": lambda today: _month_start(today) - relativedelta(months=1),
    "last year": lambda today: _year_start(today) - relativedelta(years=1),
}


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports ISO and free-form dates ("2024-01-15", "15 Jan 2024") as well as
    the keywords today, yesterday and this/last week, month or year, which
    resolve to the first day of that period.

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    normalized = " ".join(date_str.strip().lower().split())
    today = date.today()

    if normalized in _KEYWORDS:
        return _KEYWORDS[normalized](today)

    try:
        return date_parser.parse(normalized).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str.strip()}': {e}")


PERIODS = ("this-week", "this-month", "this-year", "last-week", "last-month", "last-year")


def get_date_range(period: str) -> tuple[date, date]:
    """Get the first and last day of a named period.

    Current periods end today; past periods end on their last calendar day.

    Args:
        period: One of this-week, this-month, this-year, last-week,
            last-month, last-year

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    if period not in PERIODS:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")

    today = date.today()
    start = _KEYWORDS[period.replace("-", " ")](today)
    if period.startswith("this-"):
        return start, today

    span = {
        "last-week": relativedelta(weeks=1),
        "last-month": relativedelta(months=1),
        "last-year": relativedelta(years=1),
    }[period]
    return start, start + span - timedelta(days=1)
