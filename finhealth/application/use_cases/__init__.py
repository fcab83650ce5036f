"""Application use cases package."""

from .get_dashboard_report import DashboardReport, GetDashboardReportUseCase
from .get_spending_trend import GetSpendingTrendUseCase, MonthlyTrendPoint
from .get_upcoming_payments import GetUpcomingPaymentsUseCase, UpcomingPayment
from .periods import month_bounds, previous_months, resolve_period

__all__ = [
    "DashboardReport",
    "GetDashboardReportUseCase",
    "GetSpendingTrendUseCase",
    "GetUpcomingPaymentsUseCase",
    "MonthlyTrendPoint",
    "UpcomingPayment",
    "month_bounds",
    "previous_months",
    "resolve_period",
]
