"""Use case to compute income and expense totals over recent months."""

from datetime import date

from finhealth.application.ports.finance_records import FinanceRecordsPort
from finhealth.application.use_cases.periods import (
    month_bounds,
    previous_months,
)
from finhealth.domain.models import MonthlyTrendPoint
from finhealth.domain.services import compute_period_summary
from finhealth.infrastructure.logging.logger import get_app_logger


class GetSpendingTrendUseCase:
    """Summarize transactions month by month."""

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
        months: int = 6,
        today: date | None = None,
    ) -> list[MonthlyTrendPoint]:
        """Return one trend point per month, oldest first.

        Args:
            months: Number of months ending with the current one.
            today: Optional reference date, defaults to today.

        Returns:
            list[MonthlyTrendPoint]: Totals per month.

        Raises:
            ValueError: If months is lower than 1.
        """
        if months < 1:
            raise ValueError(f"months must be at least 1, got {months}")
        reference = today or date.today()
        points = []
        for year, month in previous_months(reference.year, reference.month, months):
            start_date, end_date = month_bounds(year, month)
            transactions = self._records_repository.fetch_transactions(
                start_date,
                end_date,
            )
            summary = compute_period_summary(transactions, logger=self._logger)
            points.append(
                MonthlyTrendPoint(
                    year=year,
                    month=month,
                    income=summary.income,
                    expense=summary.expense,
                    net=summary.net,
                )
            )
        self._logger.info(f"Spending trend computed for {len(points)} months")
        return points


__all__ = ["GetSpendingTrendUseCase", "MonthlyTrendPoint"]
