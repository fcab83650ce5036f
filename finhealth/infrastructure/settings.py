"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from finhealth.infrastructure.logging.logger import get_app_logger

DEFAULT_TREND_MONTHS = 6


def load_env_file() -> None:
    """Load .env from the working directory or its parents.

    Variables already set in the environment win over the file.
    """
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True), override=False)


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the dashboard adapters.

    Attributes:
        user_id: Owner of the records to read.
        currency_code: Currency label used when printing amounts.
        trend_months: Number of months in the spending trend.
    """

    user_id: str
    currency_code: str = "IDR"
    trend_months: int = DEFAULT_TREND_MONTHS

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If FINANCE_USER_ID is missing.
        """
        load_env_file()
        user_id = os.getenv("FINANCE_USER_ID", "").strip()
        if not user_id:
            raise RuntimeError("Missing environment variable: FINANCE_USER_ID")
        currency_code = (
            os.getenv("DASHBOARD_CURRENCY", "IDR").strip().upper() or "IDR"
        )
        trend_months = cls._parse_trend_months(
            os.getenv("DASHBOARD_TREND_MONTHS"),
            logger=get_app_logger(),
        )
        return cls(
            user_id=user_id,
            currency_code=currency_code,
            trend_months=trend_months,
        )

    @staticmethod
    def _parse_trend_months(raw_value: str | None, logger) -> int:
        """Parse the trend length, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Positive number of months.
        """
        if not raw_value:
            return DEFAULT_TREND_MONTHS
        try:
            months = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid DASHBOARD_TREND_MONTHS '{raw_value}', "
                f"using {DEFAULT_TREND_MONTHS}"
            )
            return DEFAULT_TREND_MONTHS
        if months < 1:
            logger.warning(
                f"DASHBOARD_TREND_MONTHS must be positive, "
                f"using {DEFAULT_TREND_MONTHS}"
            )
            return DEFAULT_TREND_MONTHS
        return months


__all__ = ["DashboardSettings", "DEFAULT_TREND_MONTHS", "load_env_file"]
