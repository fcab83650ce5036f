"""CLI adapter printing income and expense over recent months."""

from sqlalchemy.exc import SQLAlchemyError

from finhealth.adapters.formatting import format_currency
from finhealth.application.use_cases.get_spending_trend import (
    GetSpendingTrendUseCase,
)
from finhealth.infrastructure.container import build_finance_repository
from finhealth.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finhealth.infrastructure.settings import DashboardSettings


def main() -> None:
    """Run the spending trend use case and print one line per month."""
    logger = get_app_logger()
    get_usage_logger().info("spending_trend_cli invoked")
    try:
        settings = DashboardSettings.from_env()
        repository = build_finance_repository(settings=settings)
        use_case = GetSpendingTrendUseCase(
            records_repository=repository,
            logger=logger,
        )
        points = use_case.execute(months=settings.trend_months)
    except (RuntimeError, SQLAlchemyError) as exc:
        logger.error(f"Spending trend failed: {exc}")
        raise SystemExit(1) from exc

    currency = settings.currency_code
    for point in points:
        print(
            f"{point.year}-{point.month:02d}: "
            f"income={format_currency(point.income, currency)}, "
            f"expense={format_currency(point.expense, currency)}, "
            f"net={format_currency(point.net, currency)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
