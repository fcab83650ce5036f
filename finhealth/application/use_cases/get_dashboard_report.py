"""Use case to assemble the dashboard report for a month."""

from datetime import date

from finhealth.application.ports.finance_records import FinanceRecordsPort
from finhealth.application.use_cases.periods import month_bounds, resolve_period
from finhealth.domain.models import DashboardReport
from finhealth.domain.services import (
    build_dashboard_summary,
    classify_freedom_status,
    compute_account_distribution,
    compute_health_score,
    compute_items_summary,
    compute_passive_expense,
    compute_period_summary,
    compute_record_counts,
    compute_total_balance,
)
from finhealth.infrastructure.logging.logger import get_app_logger


class GetDashboardReportUseCase:
    """Compute summary, health score, and freedom status for a month."""

    def __init__(
        self,
        records_repository: FinanceRecordsPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing the user's finance records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        month: int | None = None,
        year: int | None = None,
        today: date | None = None,
    ) -> DashboardReport:
        """Return the dashboard report for the requested month.

        Fetch errors from the repository are not caught.

        Args:
            month: Optional month number, defaults to the current month.
            year: Optional year, defaults to the current year.
            today: Optional reference date used for defaults.

        Returns:
            DashboardReport: Raw records plus derived figures.
        """
        resolved_year, resolved_month = resolve_period(
            month,
            year,
            today or date.today(),
        )
        start_date, end_date = month_bounds(resolved_year, resolved_month)

        accounts = tuple(self._records_repository.fetch_accounts())
        transactions = tuple(
            self._records_repository.fetch_transactions(start_date, end_date)
        )
        loans = tuple(self._records_repository.fetch_active_loans())
        items = tuple(self._records_repository.fetch_items())
        self._logger.info(
            f"Fetched {len(accounts)} accounts, {len(transactions)} "
            f"transactions, {len(loans)} loans, {len(items)} items "
            f"for {resolved_year}-{resolved_month:02d}"
        )

        period = compute_period_summary(transactions, logger=self._logger)
        total_balance = compute_total_balance(accounts)
        passive_expense = compute_passive_expense(loans)
        items_summary = compute_items_summary(items, logger=self._logger)
        summary = build_dashboard_summary(
            period,
            total_balance,
            passive_expense,
            items_summary,
        )

        health_score = compute_health_score(
            summary.income,
            summary.expense,
            summary.passive_income,
            summary.passive_expense,
            summary.total_balance,
        )
        status = classify_freedom_status(summary.passive_income, summary.expense)
        self._logger.info(
            f"Dashboard computed: score={health_score.score}, "
            f"grade={health_score.grade}, status={status.status}"
        )

        return DashboardReport(
            period_start=start_date,
            period_end=end_date,
            accounts=accounts,
            transactions=transactions,
            loans=loans,
            items=items,
            summary=summary,
            health_score=health_score,
            status=status,
            counts=compute_record_counts(accounts, transactions, loans, items),
            account_distribution=compute_account_distribution(accounts),
        )


__all__ = ["GetDashboardReportUseCase", "DashboardReport"]
