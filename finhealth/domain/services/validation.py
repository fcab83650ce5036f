"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger


def validate_transaction_amount(
    transaction_id: str,
    amount: Decimal,
    logger: Logger | None,
) -> None:
    """Warn when a transaction amount is negative.

    Args:
        transaction_id: Identifier of the transaction row.
        amount: Coerced transaction amount.
        logger: Logger used for warnings.
    """
    if logger is not None and amount < 0:
        logger.warning(
            f"Transaction amount is negative for id={transaction_id}: {amount}"
        )


def validate_item_value(
    item_id: str,
    item_type: str,
    value: Decimal,
    logger: Logger | None,
) -> None:
    """Warn when an asset or liability value is negative.

    Args:
        item_id: Identifier of the item row.
        item_type: Item type from the record.
        value: Coerced current value.
        logger: Logger used for warnings.
    """
    if logger is not None and value < 0:
        logger.warning(
            f"Item value is negative for id={item_id} type={item_type}: {value}"
        )


__all__ = ["validate_transaction_amount", "validate_item_value"]
