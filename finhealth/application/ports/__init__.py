"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_records import FinanceRecordsPort

__all__ = ["DatabaseEnginePort", "FinanceRecordsPort"]
