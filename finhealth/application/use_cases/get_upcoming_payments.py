"""Use case to list loan payments falling due soon."""

from datetime import date

from finhealth.application.ports.finance_records import FinanceRecordsPort
from finhealth.domain.models import UpcomingPayment
from finhealth.domain.services import find_upcoming_payments
from finhealth.domain.services.payments import DEFAULT_LOOKAHEAD_DAYS
from finhealth.infrastructure.logging.logger import get_app_logger


class GetUpcomingPaymentsUseCase:
    """Find active loans due within a lookahead window."""

    def __init__(
        self,
        records_repository: FinanceRecordsPort,
        logger=None,
    ) -> None:
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        days: int = DEFAULT_LOOKAHEAD_DAYS,
        today: date | None = None,
    ) -> list[UpcomingPayment]:
        """Return payments due within ``days`` days, soonest first.

        Raises:
            ValueError: If days is lower than 1.
        """
        if days < 1:
            raise ValueError(f"days must be at least 1, got {days}")
        loans = self._records_repository.fetch_active_loans()
        payments = find_upcoming_payments(loans, today or date.today(), days)
        self._logger.info(
            f"{len(payments)} of {len(loans)} active loans due within {days} days"
        )
        return payments


__all__ = ["GetUpcomingPaymentsUseCase", "UpcomingPayment"]
