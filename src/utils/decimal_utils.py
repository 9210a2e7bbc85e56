"""Helpers for Decimal normalization and safe arithmetic."""

from decimal import Decimal

ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, forms or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def safe_divide(numerator, denominator) -> Decimal:
    """Divide two amounts, returning zero when the divisor is not positive.

    Args:
        numerator: Dividend, any value accepted by coerce_decimal.
        denominator: Divisor, any value accepted by coerce_decimal.

    Returns:
        Decimal: The quotient, or 0 when ``denominator <= 0``.
    """
    divisor = coerce_decimal(denominator)
    if divisor <= 0:
        return Decimal("0")
    return coerce_decimal(numerator) / divisor


def sum_decimals(values) -> Decimal:
    """Sum an iterable of numeric values as Decimal."""
    return sum((coerce_decimal(value) for value in values), start=Decimal("0"))


__all__ = ["ZERO", "coerce_decimal", "safe_divide", "sum_decimals"]
