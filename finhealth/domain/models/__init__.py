"""Domain models package."""

from .finance import (
    AccountShare,
    DashboardReport,
    DashboardSummary,
    FreedomStatus,
    Grade,
    HealthBand,
    HealthScore,
    ItemsSummary,
    MonthlyTrendPoint,
    PeriodSummary,
    RecordCounts,
    StatusTag,
    UpcomingPayment,
)
from .records import Account, Item, Loan, RawAmount, Transaction

__all__ = [
    "Account",
    "AccountShare",
    "RecordCounts",
    "UpcomingPayment",
    "Item",
    "Loan",
    "RawAmount",
    "Transaction",
    "DashboardReport",
    "DashboardSummary",
    "FreedomStatus",
    "Grade",
    "HealthBand",
    "HealthScore",
    "ItemsSummary",
    "MonthlyTrendPoint",
    "PeriodSummary",
    "StatusTag",
]
