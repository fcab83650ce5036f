"""Calendar period helpers for dashboard use cases."""

import calendar
from datetime import MAXYEAR, MINYEAR, date


def resolve_period(
    month: int | None,
    year: int | None,
    today: date,
) -> tuple[int, int]:
    """Return the (year, month) pair, defaulting to today's month.

    Args:
        month: Optional month number (1-12).
        year: Optional four-digit year.
        today: Reference date for defaults.

    Returns:
        tuple[int, int]: Resolved year and month.

    Raises:
        ValueError: If the month is outside 1-12 or the year is outside
            the range datetime.date supports.
    """
    resolved_month = month if month is not None else today.month
    resolved_year = year if year is not None else today.year
    if not 1 <= resolved_month <= 12:
        raise ValueError(f"Invalid month: {resolved_month}")
    if not MINYEAR <= resolved_year <= MAXYEAR:
        raise ValueError(f"Invalid year: {resolved_year}")
    return resolved_year, resolved_month


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def previous_months(year: int, month: int, count: int) -> list[tuple[int, int]]:
    """Return the ``count`` months ending at (year, month), oldest first."""
    months = []
    for offset in range(count - 1, -1, -1):
        index = year * 12 + (month - 1) - offset
        months.append((index // 12, index % 12 + 1))
    return months


__all__ = ["resolve_period", "month_bounds", "previous_months"]
