"""Value formatters and currency rounding."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def round_currency(value: Decimal) -> Decimal:
    """Round a money amount to cents (half up)."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    """
    Format an amount with exactly two decimals and a dot separator.

    Used for machine-readable output such as the loonaangifte XML.

    Args:
        value: Amount to format

    Returns:
        String like "1234.56"
    """
    return str(round_currency(value))


def format_currency(value: Decimal, symbol: str = "€") -> str:
    """
    Format decimal as Dutch currency.

    Args:
        value: Decimal value to format
        symbol: Currency symbol (default: €)

    Returns:
        Formatted string like "€ 1.234,56"
    """
    # Handle negative values
    negative = value < 0
    value = abs(value)

    formatted = f"{round_currency(value):,.2f}"

    # Convert to Dutch format (. for thousands, , for decimals)
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def format_percentage(value: Decimal, decimals: int = 2) -> str:
    """
    Format a rate fraction as percentage.

    Args:
        value: Fraction (e.g., 0.3697 for 36.97%)
        decimals: Number of decimal places

    Returns:
        Formatted string like "36,97%"
    """
    formatted = f"{Decimal(value) * 100:.{decimals}f}".replace(".", ",")
    return f"{formatted}%"


def format_date(value: date) -> str:
    """Format date as dd-mm-yyyy."""
    return value.strftime("%d-%m-%Y")
