"""Financial freedom status classification."""

from collections.abc import Callable
from decimal import Decimal

from finhealth.domain.models import FreedomStatus
from finhealth.utils.decimal_utils import coerce_decimal

FREEDOM = FreedomStatus(status="FREEDOM", label="Financial Freedom!", color="green")
ALMOST = FreedomStatus(status="ALMOST", label="Almost Free", color="blue")
PROGRESS = FreedomStatus(status="PROGRESS", label="In Progress", color="yellow")
START = FreedomStatus(status="START", label="Start Building Assets", color="gray")

# Evaluated in order, first match wins. Rule 2 has no expense guard, so
# zero passive income against zero expense lands on ALMOST.
STATUS_RULES: tuple[
    tuple[Callable[[Decimal, Decimal], bool], FreedomStatus], ...
] = (
    (lambda passive, expense: expense > 0 and passive >= expense, FREEDOM),
    (lambda passive, expense: passive >= expense * Decimal("0.5"), ALMOST),
    (lambda passive, expense: passive > 0, PROGRESS),
)


def classify_freedom_status(passive_income, expense) -> FreedomStatus:
    """Classify how far passive income goes toward covering expenses.

    Args:
        passive_income: Passive income of the period.
        expense: Expense of the period.

    Returns:
        FreedomStatus: First matching status, START when none match.
    """
    passive = coerce_decimal(passive_income)
    spent = coerce_decimal(expense)
    for predicate, status in STATUS_RULES:
        if predicate(passive, spent):
            return status
    return START


__all__ = [
    "classify_freedom_status",
    "STATUS_RULES",
    "FREEDOM",
    "ALMOST",
    "PROGRESS",
    "START",
]
