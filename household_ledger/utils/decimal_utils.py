"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, user input or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize a nullable numeric value to Decimal.

    Args:
        value: Raw numeric value or None.

    Returns:
        Decimal | None: Normalized value, None when the input is None.
    """
    if value is None:
        return None
    return coerce_decimal(value)


__all__ = ["coerce_decimal", "coerce_optional_decimal"]
