"""Composition root for wiring infrastructure adapters."""

from finhealth.application.ports.database import DatabaseEnginePort
from finhealth.application.ports.finance_records import FinanceRecordsPort
from finhealth.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finhealth.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
)
from finhealth.infrastructure.settings import DashboardSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> FinanceRecordsPort:
    """Return the finance records repository for the configured user."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or DashboardSettings.from_env()
    return SqlAlchemyFinanceRepository(
        resolved_db,
        user_id=resolved_settings.user_id,
    )


__all__ = ["build_database_adapter", "build_finance_repository"]
