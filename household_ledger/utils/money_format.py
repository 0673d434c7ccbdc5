"""Text formatting for base-currency amounts."""

import re

BASE_CURRENCY_SUFFIX = "원"

_NON_AMOUNT_CHARS = re.compile(r"[^0-9-]")
_LEADING_INTEGER = re.compile(r"-?\d+")


def format_number(amount: int) -> str:
    """Format an integer with thousands separators."""
    return f"{amount:,}"


def format_won(amount: int, suffix: str = BASE_CURRENCY_SUFFIX) -> str:
    """Format a base-currency amount, e.g. 1,234,567원."""
    return f"{format_number(amount)}{suffix}"


def format_won_with_sign(amount: int, suffix: str = BASE_CURRENCY_SUFFIX) -> str:
    """Format a base-currency amount with an explicit sign.

    Zero is rendered without a sign.
    """
    formatted = format_number(abs(amount))
    if amount > 0:
        return f"+{formatted}{suffix}"
    if amount < 0:
        return f"-{formatted}{suffix}"
    return f"{formatted}{suffix}"


def parse_amount(raw: str) -> int:
    """Parse user-entered text into an integer amount.

    Every character other than digits and minus signs is dropped, then
    the leading integer is read and anything after it ignored. Text that
    does not start with an integer yields 0.
    """
    cleaned = _NON_AMOUNT_CHARS.sub("", raw)
    match = _LEADING_INTEGER.match(cleaned)
    if match is None:
        return 0
    return int(match.group())


__all__ = [
    "BASE_CURRENCY_SUFFIX",
    "format_number",
    "format_won",
    "format_won_with_sign",
    "parse_amount",
]
