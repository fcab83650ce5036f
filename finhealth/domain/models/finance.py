"""Domain models for financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

from .records import Account, Item, Loan, Transaction

Grade = Literal["A", "B", "C", "D", "E"]
StatusTag = Literal["FREEDOM", "ALMOST", "PROGRESS", "START"]


@dataclass(frozen=True)
class PeriodSummary:
    """Income and expense totals for a period.

    Attributes:
        income: Sum of income transactions.
        expense: Sum of expense transactions.
        passive_income: Part of income flagged as passive.
        net: Income minus expense.
        active_income: Part of income with no passive or portfolio tag.
        portfolio_income: Part of income flagged as portfolio.
    """

    income: Decimal
    expense: Decimal
    passive_income: Decimal
    net: Decimal
    active_income: Decimal = Decimal("0")
    portfolio_income: Decimal = Decimal("0")


@dataclass(frozen=True)
class ItemsSummary:
    """Totals of owned items.

    Attributes:
        total_assets: Sum of asset item values.
        total_liabilities: Sum of liability item values.
        net_worth: Assets minus liabilities.
        asset_count: Number of asset items.
        liability_count: Number of liability items.
        total_count: Number of items, neutral ones included.
    """

    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    asset_count: int = 0
    liability_count: int = 0
    total_count: int = 0


@dataclass(frozen=True)
class DashboardSummary:
    """Flat set of figures shown on the dashboard."""

    income: Decimal
    expense: Decimal
    passive_income: Decimal
    net: Decimal
    total_balance: Decimal
    passive_expense: Decimal
    total_assets: Decimal
    total_liabilities: Decimal
    items_net_worth: Decimal
    active_income: Decimal = Decimal("0")
    portfolio_income: Decimal = Decimal("0")


@dataclass(frozen=True)
class RecordCounts:
    """Number of records behind a dashboard report."""

    account_count: int
    transaction_count: int
    active_loan_count: int
    asset_count: int


@dataclass(frozen=True)
class AccountShare:
    """Account with a positive balance, as listed in the distribution."""

    id: str
    name: str
    type: str | None
    balance: Decimal


@dataclass(frozen=True)
class UpcomingPayment:
    """Loan payment falling due soon.

    Attributes:
        due_date: Next due date strictly after the reference day.
        days_until_due: Whole days from the reference day to due_date.
    """

    loan_id: str
    name: str
    monthly_payment: Decimal
    due_date: date
    days_until_due: int


@dataclass(frozen=True)
class HealthBand:
    """Points awarded by a single scoring band."""

    name: str
    points: int


@dataclass(frozen=True)
class HealthScore:
    """Composite health score and its letter grade."""

    score: int
    grade: Grade
    bands: tuple[HealthBand, ...] = ()


@dataclass(frozen=True)
class FreedomStatus:
    """Qualitative financial freedom classification."""

    status: StatusTag
    label: str
    color: str


@dataclass(frozen=True)
class DashboardReport:
    """Composite report for one period."""

    period_start: date
    period_end: date
    accounts: tuple[Account, ...]
    transactions: tuple[Transaction, ...]
    loans: tuple[Loan, ...]
    items: tuple[Item, ...]
    summary: DashboardSummary
    health_score: HealthScore
    status: FreedomStatus
    counts: RecordCounts
    account_distribution: tuple[AccountShare, ...] = ()


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Income and expense totals for one calendar month."""

    year: int
    month: int
    income: Decimal
    expense: Decimal
    net: Decimal


__all__ = [
    "Grade",
    "StatusTag",
    "PeriodSummary",
    "ItemsSummary",
    "DashboardSummary",
    "HealthBand",
    "HealthScore",
    "FreedomStatus",
    "DashboardReport",
    "MonthlyTrendPoint",
    "RecordCounts",
    "AccountShare",
    "UpcomingPayment",
]
