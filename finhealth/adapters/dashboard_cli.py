"""CLI adapter printing the dashboard report for a month.

Reads DASHBOARD_MONTH and DASHBOARD_YEAR from the environment; both default
to the current month.
"""

from datetime import MAXYEAR, MINYEAR
import os

from sqlalchemy.exc import SQLAlchemyError

from finhealth.adapters.formatting import format_currency
from finhealth.application.use_cases.get_dashboard_report import (
    GetDashboardReportUseCase,
)
from finhealth.infrastructure.container import build_finance_repository
from finhealth.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finhealth.infrastructure.settings import DashboardSettings


def _parse_int(name: str, value: str | None, logger) -> int | None:
    """Parse an integer environment value.

    Args:
        name: Environment variable name, used in warnings.
        value: Raw value.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed value or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {name} '{value}'. Expected an integer.")
        return None


def _parse_month(value: str | None, logger) -> int | None:
    month = _parse_int("DASHBOARD_MONTH", value, logger)
    if month is not None and not 1 <= month <= 12:
        logger.warning(f"Invalid DASHBOARD_MONTH '{value}'. Expected 1-12.")
        return None
    return month


def _parse_year(value: str | None, logger) -> int | None:
    year = _parse_int("DASHBOARD_YEAR", value, logger)
    if year is not None and not MINYEAR <= year <= MAXYEAR:
        logger.warning(
            f"Invalid DASHBOARD_YEAR '{value}'. Expected {MINYEAR}-{MAXYEAR}."
        )
        return None
    return year


def main() -> None:
    """Run the dashboard use case and print the report."""
    logger = get_app_logger()
    get_usage_logger().info("dashboard_cli invoked")
    month = _parse_month(os.getenv("DASHBOARD_MONTH"), logger)
    year = _parse_year(os.getenv("DASHBOARD_YEAR"), logger)

    try:
        settings = DashboardSettings.from_env()
        repository = build_finance_repository(settings=settings)
        use_case = GetDashboardReportUseCase(
            records_repository=repository,
            logger=logger,
        )
        report = use_case.execute(month=month, year=year)
    except (RuntimeError, SQLAlchemyError) as exc:
        logger.error(f"Dashboard failed: {exc}")
        raise SystemExit(1) from exc

    summary = report.summary
    currency = settings.currency_code
    print(f"Dashboard {report.period_start} - {report.period_end}")
    print(
        f"Income: {format_currency(summary.income, currency)} "
        f"(active {format_currency(summary.active_income, currency)}, "
        f"passive {format_currency(summary.passive_income, currency)}, "
        f"portfolio {format_currency(summary.portfolio_income, currency)})"
    )
    print(f"Expense: {format_currency(summary.expense, currency)}")
    print(f"Net: {format_currency(summary.net, currency)}")
    print(f"Total balance: {format_currency(summary.total_balance, currency)}")
    print(
        f"Loan payments: {format_currency(summary.passive_expense, currency)}"
    )
    print(
        f"Items: assets={format_currency(summary.total_assets, currency)}, "
        f"liabilities={format_currency(summary.total_liabilities, currency)}, "
        f"net_worth={format_currency(summary.items_net_worth, currency)}"
    )
    print(
        f"Health score: {report.health_score.score} "
        f"(grade {report.health_score.grade})"
    )
    for band in report.health_score.bands:
        print(f"  {band.name}: +{band.points}")
    print(f"Status: {report.status.label} [{report.status.status}]")
    counts = report.counts
    print(
        f"Records: {counts.account_count} accounts, "
        f"{counts.transaction_count} transactions, "
        f"{counts.active_loan_count} active loans, {counts.asset_count} assets"
    )
    for share in report.account_distribution:
        print(f"  {share.name}: {format_currency(share.balance, currency)}")


if __name__ == "__main__":  # pragma: no cover
    main()
