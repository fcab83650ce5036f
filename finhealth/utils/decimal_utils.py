"""Helpers for Decimal normalization."""

from contextlib import contextmanager
from decimal import Decimal, InvalidOperation, Overflow, localcontext


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Missing, unparsable and non-finite values collapse to zero so that
    aggregates stay total over whatever the data store hands back.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Decimal("0")
    try:
        converted = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not converted.is_finite():
        return Decimal("0")
    return converted


@contextmanager
def saturating_context():
    """Decimal context where results past the exponent limit become
    signed Infinity instead of raising Overflow."""
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        yield ctx


__all__ = ["coerce_decimal", "saturating_context"]
