"""Effective amounts and base-currency conversion.

Rounding rule: conversions round half away from zero (``ROUND_HALF_UP``
on ``Decimal``). Converting native -> base -> native is not guaranteed to
return the original figure.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from household_ledger.domain.models.ledger import EntryAmount
from household_ledger.domain.models.records import Currency, Transaction, Transfer
from household_ledger.domain.services.currency_registry import CurrencyRegistry
from household_ledger.domain.services.validation import validate_exchange_rate

_UNIT = Decimal("1")


def effective_amount(amount: int, adjustment: int = 0) -> int:
    """Return the amount after subtracting its adjustment.

    The result is not clamped: an adjustment larger than the amount
    yields a negative effective amount.
    """
    return amount - adjustment


def round_half_away_from_zero(value: Decimal) -> int:
    """Round a Decimal to an integer, ties away from zero."""
    return int(value.quantize(_UNIT, rounding=ROUND_HALF_UP))


def convert_to_base(amount: int, rate) -> int:
    """Convert a native-currency figure to base currency.

    Args:
        amount: Figure in the auxiliary currency.
        rate: Base-currency units per auxiliary unit.

    Returns:
        int: ``round(amount * rate)``.
    """
    resolved = validate_exchange_rate(rate)
    return round_half_away_from_zero(Decimal(amount) * resolved)


def convert_from_base(amount: int, rate) -> int:
    """Convert a base-currency figure to an auxiliary currency.

    Args:
        amount: Figure in base currency.
        rate: Base-currency units per auxiliary unit.

    Returns:
        int: ``round(amount / rate)``.
    """
    resolved = validate_exchange_rate(rate)
    return round_half_away_from_zero(Decimal(amount) / resolved)


def to_base(
    amount: int,
    currency_id: str | None,
    registry: CurrencyRegistry,
) -> int:
    """Convert an asset-native figure to base currency.

    A ``None`` currency id means the figure is already base currency.
    """
    rate = registry.rate_for(currency_id)
    if rate is None:
        return amount
    return convert_to_base(amount, rate)


def from_base(
    amount: int,
    currency_id: str | None,
    registry: CurrencyRegistry,
) -> int:
    """Convert a base figure to an asset's native currency."""
    rate = registry.rate_for(currency_id)
    if rate is None:
        return amount
    return convert_from_base(amount, rate)


def native_transaction_amounts(transaction: Transaction) -> tuple[int, int]:
    """Return (amount, adjustment) in the figures the asset is kept in.

    Native figures win when recorded; otherwise the base figures are used.
    """
    if transaction.original_amount is not None:
        return (
            transaction.original_amount,
            transaction.original_adjustment_amount or 0,
        )
    return transaction.amount, transaction.adjustment_amount


def transaction_entry_amount(transaction: Transaction) -> EntryAmount:
    """Build the display projection of a transaction."""
    base = effective_amount(transaction.amount, transaction.adjustment_amount)
    if not transaction.has_native_figures:
        return EntryAmount(base=base)
    native_amount, native_adjustment = native_transaction_amounts(transaction)
    return EntryAmount(
        base=base,
        native=effective_amount(native_amount, native_adjustment),
        currency_id=transaction.original_currency_id,
    )


def transfer_entry_amount(transfer: Transfer) -> EntryAmount:
    """Build the display projection of a transfer's principal."""
    if transfer.original_amount is None:
        return EntryAmount(base=transfer.amount)
    return EntryAmount(
        base=transfer.amount,
        native=transfer.original_amount,
        currency_id=transfer.original_currency_id,
    )


@dataclass(frozen=True)
class ReconciledAmounts:
    """Stored figures derived from native-currency input.

    Attributes:
        amount: Base-currency principal.
        adjustment_amount: Base-currency adjustment.
        original_amount: Native principal, None for base-currency assets.
        original_adjustment_amount: Native adjustment when positive.
        original_currency_id: Currency of the native figures.
        exchange_rate: Rate snapshot used for the conversion.
    """

    amount: int
    adjustment_amount: int = 0
    original_amount: int | None = None
    original_adjustment_amount: int | None = None
    original_currency_id: str | None = None
    exchange_rate: Decimal | None = None


def reconcile_input(
    native_amount: int,
    native_adjustment: int,
    currency: Currency | None,
) -> ReconciledAmounts:
    """Derive stored figures from user input in the asset's currency.

    Args:
        native_amount: Principal as entered.
        native_adjustment: Adjustment as entered.
        currency: Asset currency, None for base-currency assets.

    Returns:
        ReconciledAmounts: Base figures plus the native snapshot.
    """
    if currency is None:
        return ReconciledAmounts(
            amount=native_amount,
            adjustment_amount=native_adjustment,
        )
    rate = currency.exchange_rate
    return ReconciledAmounts(
        amount=convert_to_base(native_amount, rate),
        adjustment_amount=convert_to_base(native_adjustment, rate),
        original_amount=native_amount,
        original_adjustment_amount=(
            native_adjustment if native_adjustment > 0 else None
        ),
        original_currency_id=currency.id,
        exchange_rate=rate,
    )


__all__ = [
    "effective_amount",
    "round_half_away_from_zero",
    "convert_to_base",
    "convert_from_base",
    "to_base",
    "from_base",
    "native_transaction_amounts",
    "transaction_entry_amount",
    "transfer_entry_amount",
    "ReconciledAmounts",
    "reconcile_input",
]
