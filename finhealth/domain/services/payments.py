"""Upcoming loan payment detection."""

import calendar
from collections.abc import Iterable
from datetime import date

from finhealth.domain.models import Loan, UpcomingPayment
from finhealth.utils.decimal_utils import coerce_decimal

DEFAULT_LOOKAHEAD_DAYS = 7


def parse_due_day(raw) -> int | None:
    """Return the day of month a loan falls due, or None when unusable."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        day = int(str(raw).strip())
    except ValueError:
        return None
    if not 1 <= day <= 31:
        return None
    return day


def _due_date_in_month(year: int, month: int, day: int) -> date:
    # Days past the end of a short month fall on its last day.
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def _next_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def find_upcoming_payments(
    loans: Iterable[Loan],
    today: date,
    days: int = DEFAULT_LOOKAHEAD_DAYS,
) -> list[UpcomingPayment]:
    """List active loans due within the next ``days`` days.

    A loan due today is not upcoming. This month's due date is checked
    first, then next month's.

    Args:
        loans: Loans of the user.
        today: Reference day.
        days: Lookahead window in days.

    Returns:
        list[UpcomingPayment]: Payments sorted by days until due.
    """
    upcoming = []
    next_year, next_month = _next_month(today.year, today.month)
    for loan in loans:
        if not loan.is_active:
            continue
        due_day = parse_due_day(loan.due_day)
        if due_day is None:
            continue
        candidates = (
            _due_date_in_month(today.year, today.month, due_day),
            _due_date_in_month(next_year, next_month, due_day),
        )
        for due_date in candidates:
            days_until_due = (due_date - today).days
            if 0 < days_until_due <= days:
                upcoming.append(
                    UpcomingPayment(
                        loan_id=loan.id,
                        name=loan.name,
                        monthly_payment=coerce_decimal(loan.monthly_payment),
                        due_date=due_date,
                        days_until_due=days_until_due,
                    )
                )
                break
    return sorted(upcoming, key=lambda payment: payment.days_until_due)


__all__ = ["DEFAULT_LOOKAHEAD_DAYS", "find_upcoming_payments", "parse_due_day"]
