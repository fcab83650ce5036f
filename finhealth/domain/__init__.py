"""Domain package for business rules and core models."""

from .models import (
    Account,
    AccountShare,
    DashboardReport,
    DashboardSummary,
    FreedomStatus,
    HealthBand,
    HealthScore,
    Item,
    ItemsSummary,
    Loan,
    MonthlyTrendPoint,
    PeriodSummary,
    RecordCounts,
    Transaction,
    UpcomingPayment,
)
from .services import (
    build_dashboard_summary,
    classify_freedom_status,
    compute_account_distribution,
    compute_health_score,
    compute_items_summary,
    compute_passive_expense,
    compute_period_summary,
    compute_record_counts,
    compute_total_balance,
    find_upcoming_payments,
    grade_for_score,
)

__all__ = [
    "Account",
    "AccountShare",
    "DashboardReport",
    "DashboardSummary",
    "FreedomStatus",
    "HealthBand",
    "HealthScore",
    "Item",
    "ItemsSummary",
    "Loan",
    "MonthlyTrendPoint",
    "PeriodSummary",
    "RecordCounts",
    "Transaction",
    "UpcomingPayment",
    "build_dashboard_summary",
    "classify_freedom_status",
    "compute_account_distribution",
    "compute_health_score",
    "compute_items_summary",
    "compute_passive_expense",
    "compute_period_summary",
    "compute_record_counts",
    "compute_total_balance",
    "find_upcoming_payments",
    "grade_for_score",
]
