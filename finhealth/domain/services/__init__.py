"""Domain services package."""

from .finance import (
    build_dashboard_summary,
    compute_account_distribution,
    compute_items_summary,
    compute_passive_expense,
    compute_period_summary,
    compute_record_counts,
    compute_total_balance,
)
from .health import compute_health_score, grade_for_score
from .payments import find_upcoming_payments
from .status import classify_freedom_status
from .validation import validate_item_value, validate_transaction_amount

__all__ = [
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
    "validate_item_value",
    "validate_transaction_amount",
]
