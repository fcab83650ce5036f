"""Port for read access to a user's finance records."""

from datetime import date
from typing import Protocol

from finhealth.domain.models import Account, Item, Loan, Transaction


class FinanceRecordsPort(Protocol):
    """Port exposing the records of a single user.

    Implementations return fully materialized snapshots and let failures
    propagate to the caller.
    """

    def fetch_accounts(self) -> list[Account]:
        """Return the user's accounts."""

    def fetch_transactions(
        self,
        start_date: date | None,
        end_date: date | None,
        transaction_type: str | None = None,
    ) -> list[Transaction]:
        """Return non-deleted transactions dated within the bounds."""

    def fetch_active_loans(self) -> list[Loan]:
        """Return the user's active loans."""

    def fetch_items(self) -> list[Item]:
        """Return the user's owned items."""


__all__ = ["FinanceRecordsPort"]
