"""Engine for the finance records database, configured by FINANCE_DB_URL."""

import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from finhealth.application.ports.database import DatabaseEnginePort
from finhealth.infrastructure.settings import load_env_file


def _get_env_var(name: str) -> str:
    """Return an environment variable, loading the working directory's
    .env first.

    Raises:
        RuntimeError: If the variable is missing or empty.
    """
    load_env_file()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Return the process-wide engine, created on first use."""
    global _finance_engine
    if _finance_engine is None:
        _finance_engine = _create_engine(_get_env_var("FINANCE_DB_URL"))
    return _finance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the module-level engine."""

    def get_finance_engine(self) -> Engine:
        return get_finance_engine()


__all__ = ["get_finance_engine", "SqlAlchemyDatabaseEngineAdapter"]
