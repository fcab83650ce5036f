"""Domain models for raw finance records.

Records mirror rows handed over by the data store. Numeric fields keep
their raw value; services coerce them when aggregating.
"""

import datetime
from dataclasses import dataclass
from decimal import Decimal

RawAmount = Decimal | int | float | str | None


@dataclass(frozen=True)
class Account:
    """Account holding a current balance."""

    id: str
    name: str
    current_balance: RawAmount
    is_excluded_from_total: bool = False
    type: str | None = None


@dataclass(frozen=True)
class Transaction:
    """Income or expense movement.

    Attributes:
        type: Either "income" or "expense"; other values are ignored.
        income_type: "passive", "portfolio", "active" or None for income
            rows. Anything other than passive or portfolio counts as active.
        is_deleted: Soft-delete flag; deleted rows never count.
    """

    id: str
    type: str
    amount: RawAmount
    date: datetime.date | None = None
    income_type: str | None = None
    is_deleted: bool = False
    description: str | None = None


@dataclass(frozen=True)
class Loan:
    """Loan with a recurring monthly payment.

    Attributes:
        due_day: Day of month the payment falls due, raw from the store.
    """

    id: str
    name: str
    monthly_payment: RawAmount
    is_active: bool = True
    due_day: int | str | None = None


@dataclass(frozen=True)
class Item:
    """Owned item classified as asset, liability, or neutral."""

    id: str
    name: str
    type: str
    current_value: RawAmount


__all__ = ["Account", "Transaction", "Loan", "Item", "RawAmount"]
