"""Domain constants for finance records."""

TRANSACTION_TYPE_INCOME = "income"
TRANSACTION_TYPE_EXPENSE = "expense"

# Income rows tagged with neither of these count as active income.
INCOME_TYPE_PASSIVE = "passive"
INCOME_TYPE_PORTFOLIO = "portfolio"

ITEM_TYPE_ASSET = "asset"
ITEM_TYPE_LIABILITY = "liability"


__all__ = [
    "TRANSACTION_TYPE_INCOME",
    "TRANSACTION_TYPE_EXPENSE",
    "INCOME_TYPE_PASSIVE",
    "INCOME_TYPE_PORTFOLIO",
    "ITEM_TYPE_ASSET",
    "ITEM_TYPE_LIABILITY",
]
