"""Database ports for the finance dashboard.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the finance records database."""

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance records database.

        Returns:
            Engine: SQLAlchemy engine connected to the records store.
        """


__all__ = ["DatabaseEnginePort"]
