"""SQLAlchemy-backed repository for a user's finance records."""

from datetime import date

from sqlalchemy import text

from finhealth.application.ports.database import DatabaseEnginePort
from finhealth.application.ports.finance_records import FinanceRecordsPort
from finhealth.domain.models import Account, Item, Loan, Transaction


class SqlAlchemyFinanceRepository(FinanceRecordsPort):
    """Read-only repository over the accounts, transactions, loans and
    items tables of a single user."""

    def __init__(self, db_port: DatabaseEnginePort, user_id: str) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            user_id: Owner of the records to read.
        """
        self._db_port = db_port
        self._user_id = user_id

    def fetch_accounts(self) -> list[Account]:
        query = text(
            """
            SELECT id, name, type, current_balance, is_excluded_from_total
            FROM accounts
            WHERE user_id = :user_id AND is_active = TRUE
            ORDER BY display_order
            """
        )
        rows = self._fetch_all(query, {"user_id": self._user_id})
        return [
            Account(
                id=str(row.id),
                name=row.name,
                current_balance=row.current_balance,
                is_excluded_from_total=bool(row.is_excluded_from_total),
                type=row.type,
            )
            for row in rows
        ]

    def fetch_transactions(
        self,
        start_date: date | None,
        end_date: date | None,
        transaction_type: str | None = None,
    ) -> list[Transaction]:
        query = self._build_transactions_query(
            start_date,
            end_date,
            transaction_type,
        )
        params = self._build_transactions_params(
            start_date,
            end_date,
            transaction_type,
        )
        params["user_id"] = self._user_id
        rows = self._fetch_all(query, params)
        return [
            Transaction(
                id=str(row.id),
                type=row.type,
                amount=row.amount,
                date=row.date,
                income_type=row.income_type,
                is_deleted=bool(row.is_deleted),
                description=row.description,
            )
            for row in rows
        ]

    def fetch_active_loans(self) -> list[Loan]:
        query = text(
            """
            SELECT id, name, monthly_payment, is_active, due_date
            FROM loans
            WHERE user_id = :user_id AND is_active = TRUE
            ORDER BY created_at DESC
            """
        )
        rows = self._fetch_all(query, {"user_id": self._user_id})
        return [
            Loan(
                id=str(row.id),
                name=row.name,
                monthly_payment=row.monthly_payment,
                is_active=bool(row.is_active),
                due_day=row.due_date,
            )
            for row in rows
        ]

    def fetch_items(self) -> list[Item]:
        query = text(
            """
            SELECT id, name, type, current_value
            FROM items
            WHERE user_id = :user_id AND is_sold = FALSE
            ORDER BY name
            """
        )
        rows = self._fetch_all(query, {"user_id": self._user_id})
        return [
            Item(
                id=str(row.id),
                name=row.name,
                type=row.type,
                current_value=row.current_value,
            )
            for row in rows
        ]

    def _fetch_all(self, query, params: dict) -> list:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            return conn.execute(query, params).all()

    @staticmethod
    def _build_transactions_query(
        start_date: date | None,
        end_date: date | None,
        transaction_type: str | None,
    ):
        base_sql = """
        SELECT id, type, amount, date, income_type, is_deleted, description
        FROM transactions
        WHERE user_id = :user_id AND is_deleted = FALSE
        """
        if start_date:
            base_sql += " AND date >= :start_date"
        if end_date:
            base_sql += " AND date <= :end_date"
        if transaction_type:
            base_sql += " AND type = :transaction_type"
        base_sql += " ORDER BY date DESC, created_at DESC"
        return text(base_sql)

    @staticmethod
    def _build_transactions_params(
        start_date: date | None,
        end_date: date | None,
        transaction_type: str | None,
    ) -> dict[str, date | str]:
        params: dict[str, date | str] = {}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        if transaction_type:
            params["transaction_type"] = transaction_type
        return params


__all__ = ["SqlAlchemyFinanceRepository"]
