"""Calendar month helpers for ledger windows."""

import calendar
from datetime import date, datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Seoul"


def month_range(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a calendar month.

    Args:
        year: Four digit year.
        month: Month number from 1 to 12.

    Returns:
        tuple[date, date]: Inclusive start and end dates.

    Raises:
        ValueError: If the month is outside 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) before the given one."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) after the given one."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def today_in(timezone: str = DEFAULT_TIMEZONE) -> date:
    """Return today's date in the given IANA timezone."""
    return datetime.now(ZoneInfo(timezone)).date()


def current_year_month(timezone: str = DEFAULT_TIMEZONE) -> tuple[int, int]:
    """Return the current (year, month) in the given IANA timezone."""
    today = today_in(timezone)
    return today.year, today.month


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse a YYYY-MM string.

    Args:
        value: Month string such as 2024-05.

    Returns:
        tuple[int, int]: Parsed year and month.

    Raises:
        ValueError: If the value is not a valid YYYY-MM string.
    """
    parts = value.strip().split("-")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Expected YYYY-MM, got {value!r}")
    year, month = int(parts[0]), int(parts[1])
    month_range(year, month)
    return year, month


__all__ = [
    "DEFAULT_TIMEZONE",
    "month_range",
    "previous_month",
    "next_month",
    "today_in",
    "current_year_month",
    "parse_year_month",
]
