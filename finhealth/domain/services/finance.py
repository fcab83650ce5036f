"""Domain services for period and net worth aggregates."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from functools import reduce
from logging import Logger

from finhealth.domain.constants import (
    INCOME_TYPE_PASSIVE,
    INCOME_TYPE_PORTFOLIO,
    ITEM_TYPE_ASSET,
    ITEM_TYPE_LIABILITY,
    TRANSACTION_TYPE_EXPENSE,
    TRANSACTION_TYPE_INCOME,
)
from finhealth.domain.models import (
    Account,
    AccountShare,
    DashboardSummary,
    Item,
    ItemsSummary,
    Loan,
    PeriodSummary,
    RecordCounts,
    Transaction,
)
from finhealth.domain.services.validation import (
    validate_item_value,
    validate_transaction_amount,
)
from finhealth.utils.decimal_utils import coerce_decimal

ZERO = Decimal("0")

_EMPTY_PERIOD = PeriodSummary(
    income=ZERO,
    expense=ZERO,
    passive_income=ZERO,
    net=ZERO,
)
_EMPTY_ITEMS = ItemsSummary(
    total_assets=ZERO,
    total_liabilities=ZERO,
    net_worth=ZERO,
)


def compute_period_summary(
    transactions: Iterable[Transaction],
    *,
    logger: Logger | None = None,
) -> PeriodSummary:
    """Fold transactions into income, expense, and net totals.

    The caller filters transactions to the period. Soft-deleted rows and
    unknown transaction types are skipped. Income is also split by its
    income_type into passive, portfolio and active parts.

    Args:
        transactions: Transactions of the period.
        logger: Optional logger used for data warnings.

    Returns:
        PeriodSummary: Totals for the period, zeros for empty input.
    """

    def _step(acc: PeriodSummary, tx: Transaction) -> PeriodSummary:
        if tx.is_deleted:
            return acc
        amount = coerce_decimal(tx.amount)
        if tx.type == TRANSACTION_TYPE_INCOME:
            validate_transaction_amount(tx.id, amount, logger)
            income = acc.income + amount
            passive_income = acc.passive_income
            portfolio_income = acc.portfolio_income
            active_income = acc.active_income
            if tx.income_type == INCOME_TYPE_PASSIVE:
                passive_income += amount
            elif tx.income_type == INCOME_TYPE_PORTFOLIO:
                portfolio_income += amount
            else:
                active_income += amount
            return PeriodSummary(
                income=income,
                expense=acc.expense,
                passive_income=passive_income,
                net=income - acc.expense,
                active_income=active_income,
                portfolio_income=portfolio_income,
            )
        if tx.type == TRANSACTION_TYPE_EXPENSE:
            validate_transaction_amount(tx.id, amount, logger)
            expense = acc.expense + amount
            return PeriodSummary(
                income=acc.income,
                expense=expense,
                passive_income=acc.passive_income,
                net=acc.income - expense,
                active_income=acc.active_income,
                portfolio_income=acc.portfolio_income,
            )
        return acc

    return reduce(_step, transactions, _EMPTY_PERIOD)


def compute_total_balance(accounts: Iterable[Account]) -> Decimal:
    """Sum balances of accounts not excluded from the total.

    Args:
        accounts: Accounts of the user.

    Returns:
        Decimal: Total balance, zero for empty input.
    """
    return sum(
        (
            coerce_decimal(account.current_balance)
            for account in accounts
            if not account.is_excluded_from_total
        ),
        ZERO,
    )


def compute_passive_expense(loans: Iterable[Loan]) -> Decimal:
    """Sum monthly payments of active loans.

    Args:
        loans: Loans of the user.

    Returns:
        Decimal: Recurring loan obligations per month.
    """
    return sum(
        (coerce_decimal(loan.monthly_payment) for loan in loans if loan.is_active),
        ZERO,
    )


def compute_items_summary(
    items: Iterable[Item],
    *,
    logger: Logger | None = None,
) -> ItemsSummary:
    """Fold owned items into asset, liability, and net worth totals.

    Args:
        items: Items of the user.
        logger: Optional logger used for data warnings.

    Returns:
        ItemsSummary: Totals and counts; neutral items only count in
        total_count.
    """

    def _step(acc: ItemsSummary, item: Item) -> ItemsSummary:
        total_count = acc.total_count + 1
        if item.type not in (ITEM_TYPE_ASSET, ITEM_TYPE_LIABILITY):
            return ItemsSummary(
                total_assets=acc.total_assets,
                total_liabilities=acc.total_liabilities,
                net_worth=acc.net_worth,
                asset_count=acc.asset_count,
                liability_count=acc.liability_count,
                total_count=total_count,
            )
        value = coerce_decimal(item.current_value)
        validate_item_value(item.id, item.type, value, logger)
        if item.type == ITEM_TYPE_ASSET:
            total_assets = acc.total_assets + value
            return ItemsSummary(
                total_assets=total_assets,
                total_liabilities=acc.total_liabilities,
                net_worth=total_assets - acc.total_liabilities,
                asset_count=acc.asset_count + 1,
                liability_count=acc.liability_count,
                total_count=total_count,
            )
        total_liabilities = acc.total_liabilities + value
        return ItemsSummary(
            total_assets=acc.total_assets,
            total_liabilities=total_liabilities,
            net_worth=acc.total_assets - total_liabilities,
            asset_count=acc.asset_count,
            liability_count=acc.liability_count + 1,
            total_count=total_count,
        )

    return reduce(_step, items, _EMPTY_ITEMS)


def build_dashboard_summary(
    period: PeriodSummary,
    total_balance: Decimal,
    passive_expense: Decimal,
    items: ItemsSummary,
) -> DashboardSummary:
    """Merge the individual aggregates into the dashboard summary."""
    return DashboardSummary(
        income=period.income,
        expense=period.expense,
        passive_income=period.passive_income,
        net=period.net,
        total_balance=total_balance,
        passive_expense=passive_expense,
        total_assets=items.total_assets,
        total_liabilities=items.total_liabilities,
        items_net_worth=items.net_worth,
        active_income=period.active_income,
        portfolio_income=period.portfolio_income,
    )


def compute_record_counts(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    loans: Sequence[Loan],
    items: Sequence[Item],
) -> RecordCounts:
    """Count the records behind a report.

    Only active loans and asset items are counted.
    """
    return RecordCounts(
        account_count=len(accounts),
        transaction_count=len(transactions),
        active_loan_count=sum(1 for loan in loans if loan.is_active),
        asset_count=sum(1 for item in items if item.type == ITEM_TYPE_ASSET),
    )


def compute_account_distribution(
    accounts: Iterable[Account],
) -> tuple[AccountShare, ...]:
    """List accounts holding a positive balance, largest first.

    Accounts excluded from the total are listed too.

    Args:
        accounts: Accounts of the user.

    Returns:
        tuple[AccountShare, ...]: Shares sorted by balance descending.
    """
    shares = [
        AccountShare(
            id=account.id,
            name=account.name,
            type=account.type,
            balance=coerce_decimal(account.current_balance),
        )
        for account in accounts
    ]
    positive = [share for share in shares if share.balance > 0]
    return tuple(sorted(positive, key=lambda share: share.balance, reverse=True))


__all__ = [
    "compute_period_summary",
    "compute_total_balance",
    "compute_passive_expense",
    "compute_items_summary",
    "build_dashboard_summary",
    "compute_record_counts",
    "compute_account_distribution",
]
