"""CLI adapter printing loan payments due soon.

DASHBOARD_PAYMENT_DAYS sets the lookahead window, 7 days by default.
"""

import os

from sqlalchemy.exc import SQLAlchemyError

from finhealth.adapters.formatting import format_currency
from finhealth.application.use_cases.get_upcoming_payments import (
    GetUpcomingPaymentsUseCase,
)
from finhealth.domain.services.payments import DEFAULT_LOOKAHEAD_DAYS
from finhealth.infrastructure.container import build_finance_repository
from finhealth.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finhealth.infrastructure.settings import DashboardSettings


def _parse_days(value: str | None, logger) -> int:
    if not value:
        return DEFAULT_LOOKAHEAD_DAYS
    try:
        days = int(value)
    except ValueError:
        days = 0
    if days < 1:
        logger.warning(
            f"Invalid DASHBOARD_PAYMENT_DAYS '{value}', "
            f"using {DEFAULT_LOOKAHEAD_DAYS}"
        )
        return DEFAULT_LOOKAHEAD_DAYS
    return days


def main() -> None:
    """Run the upcoming payments use case and print one line per loan."""
    logger = get_app_logger()
    get_usage_logger().info("upcoming_payments_cli invoked")
    days = _parse_days(os.getenv("DASHBOARD_PAYMENT_DAYS"), logger)
    try:
        settings = DashboardSettings.from_env()
        repository = build_finance_repository(settings=settings)
        use_case = GetUpcomingPaymentsUseCase(
            records_repository=repository,
            logger=logger,
        )
        payments = use_case.execute(days=days)
    except (RuntimeError, SQLAlchemyError) as exc:
        logger.error(f"Upcoming payments failed: {exc}")
        raise SystemExit(1) from exc

    if not payments:
        print(f"No loan payments due in the next {days} days")
        return
    for payment in payments:
        print(
            f"{payment.due_date} (in {payment.days_until_due} days): "
            f"{payment.name} "
            f"{format_currency(payment.monthly_payment, settings.currency_code)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
