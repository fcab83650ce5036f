"""Financial health scoring.

The score adds four independent bands worth up to 25 points each: debt
service, savings rate, passive income ratio, and liquidity buffer. Without
income the three income-based bands collapse into a single flat band worth
30 points, so such a profile tops out at 55 (grade C). That ceiling is kept
as is.
"""

from decimal import Decimal

from finhealth.domain.models import Grade, HealthBand, HealthScore
from finhealth.utils.decimal_utils import coerce_decimal, saturating_context

NO_INCOME_POINTS = 30
NO_EXPENSE_POINTS = 15

GRADE_THRESHOLDS: tuple[tuple[int, Grade], ...] = (
    (80, "A"),
    (60, "B"),
    (40, "C"),
    (20, "D"),
)


def grade_for_score(score: int) -> Grade:
    """Map a score to its letter grade using inclusive lower bounds."""
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "E"


def _debt_service_points(income: Decimal, passive_expense: Decimal) -> int:
    ratio = passive_expense / income
    if ratio < Decimal("0.30"):
        return 25
    if ratio < Decimal("0.50"):
        return 15
    return 5


def _savings_rate_points(income: Decimal, expense: Decimal) -> int:
    rate = (income - expense) / income
    if rate >= Decimal("0.20"):
        return 25
    if rate >= Decimal("0.10"):
        return 15
    if rate > 0:
        return 10
    return 0


def _passive_ratio_points(income: Decimal, passive_income: Decimal) -> int:
    ratio = passive_income / income
    if ratio >= Decimal("0.50"):
        return 25
    if ratio >= Decimal("0.20"):
        return 15
    if ratio > 0:
        return 10
    return 5


def _liquidity_points(expense: Decimal, total_balance: Decimal) -> int:
    if expense <= 0:
        return NO_EXPENSE_POINTS
    if total_balance >= expense * 3:
        return 25
    if total_balance >= expense * 2:
        return 20
    if total_balance >= expense:
        return 15
    if total_balance > 0:
        return 10
    return 0


def compute_health_score(
    income,
    expense,
    passive_income,
    passive_expense,
    total_balance,
) -> HealthScore:
    """Compute the composite health score and grade.

    Args:
        income: Income of the period.
        expense: Expense of the period.
        passive_income: Passive part of the income.
        passive_expense: Monthly payments of active loans.
        total_balance: Balance across included accounts.

    Returns:
        HealthScore: Score in [0, 100], grade, and the awarded bands.
    """
    income = coerce_decimal(income)
    expense = coerce_decimal(expense)
    passive_income = coerce_decimal(passive_income)
    passive_expense = coerce_decimal(passive_expense)
    total_balance = coerce_decimal(total_balance)

    with saturating_context():
        if income > 0:
            bands = [
                HealthBand(
                    "debt_service",
                    _debt_service_points(income, passive_expense),
                ),
                HealthBand(
                    "savings_rate",
                    _savings_rate_points(income, expense),
                ),
                HealthBand(
                    "passive_income_ratio",
                    _passive_ratio_points(income, passive_income),
                ),
            ]
        else:
            bands = [HealthBand("no_income", NO_INCOME_POINTS)]
        bands.append(
            HealthBand(
                "liquidity_buffer",
                _liquidity_points(expense, total_balance),
            )
        )

    score = sum(band.points for band in bands)
    return HealthScore(
        score=score,
        grade=grade_for_score(score),
        bands=tuple(bands),
    )


__all__ = ["compute_health_score", "grade_for_score", "GRADE_THRESHOLDS"]
