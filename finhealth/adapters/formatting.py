"""Display helpers shared by CLI adapters."""

from decimal import Decimal


def format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    return f"{value:,.2f} {currency_code}"


__all__ = ["format_currency"]
