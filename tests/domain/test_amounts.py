"""Tests for effective amounts and base-currency conversion."""

from datetime import date
from decimal import Decimal

import pytest

from household_ledger.domain.constants import EXPENSE
from household_ledger.domain.errors import CurrencyLookupError, ValidationError
from household_ledger.domain.models import Currency, Transaction, Transfer
from household_ledger.domain.services.amounts import (
    convert_from_base,
    convert_to_base,
    effective_amount,
    from_base,
    native_transaction_amounts,
    reconcile_input,
    to_base,
    transaction_entry_amount,
    transfer_entry_amount,
)
from household_ledger.domain.services.currency_registry import CurrencyRegistry

YEN = Currency(id="jpy", name="Yen", symbol="¥", exchange_rate=Decimal("9.5"))
RATE = Decimal("21.5")


def _transaction(**overrides) -> Transaction:
    values = {
        "id": "t1",
        "type": EXPENSE,
        "transaction_date": date(2024, 3, 1),
        "asset_id": "wallet",
        "category_id": "food",
        "amount": 1000,
        "title": "Lunch",
    }
    values.update(overrides)
    return Transaction(**values)


def test_effective_amount_is_not_clamped() -> None:
    """An adjustment above the amount should give a negative figure."""
    assert effective_amount(1000, 150) == 850
    assert effective_amount(100, 150) == -50
    assert effective_amount(100) == 100


def test_conversion_examples() -> None:
    """Conversions should multiply or divide by the rate and round."""
    assert convert_to_base(100, RATE) == 2150
    assert convert_from_base(2150, RATE) == 100


def test_conversion_round_trip_is_lossy() -> None:
    """A base figure off the rate grid does not survive a round trip."""
    native = convert_from_base(2151, RATE)

    assert native == 100
    assert convert_to_base(native, RATE) == 2150


def test_conversion_rounds_half_away_from_zero() -> None:
    """Ties should round away from zero in both directions."""
    assert convert_to_base(1, Decimal("2.5")) == 3
    assert convert_to_base(-1, Decimal("2.5")) == -3
    assert convert_from_base(5, Decimal("2")) == 3
    assert convert_from_base(-5, Decimal("2")) == -3


def test_conversion_accepts_string_rates() -> None:
    """Rates read from storage as text or float should be normalized."""
    assert convert_to_base(10, "1.5") == 15
    assert convert_to_base(10, 1.5) == 15


@pytest.mark.parametrize("rate", [Decimal("0"), Decimal("-1")])
def test_conversion_rejects_non_positive_rate(rate: Decimal) -> None:
    """Non-positive rates should be refused like any stored rate."""
    with pytest.raises(ValidationError, match="Exchange rate must be positive"):
        convert_to_base(100, rate)
    with pytest.raises(ValidationError, match="Exchange rate must be positive"):
        convert_from_base(100, rate)


def test_to_base_and_from_base_use_registry() -> None:
    """None means base currency; other ids go through the registry."""
    registry = CurrencyRegistry([YEN])

    assert to_base(500, None, registry) == 500
    assert from_base(500, None, registry) == 500
    assert to_base(100, "jpy", registry) == 950
    assert from_base(950, "jpy", registry) == 100


def test_to_base_raises_for_unknown_currency() -> None:
    """Unknown currency ids should never fall back to base currency."""
    with pytest.raises(CurrencyLookupError):
        to_base(100, "eur", CurrencyRegistry([YEN]))


def test_native_amounts_prefer_recorded_original_figures() -> None:
    """Native figures win whenever an original amount was recorded."""
    foreign = _transaction(
        amount=2150,
        adjustment_amount=215,
        original_amount=100,
        original_adjustment_amount=10,
        original_currency_id="usd",
        exchange_rate=RATE,
    )
    no_original_adjustment = _transaction(
        amount=2150,
        adjustment_amount=0,
        original_amount=100,
        original_currency_id="usd",
        exchange_rate=RATE,
    )
    base_only = _transaction(amount=1000, adjustment_amount=100)

    assert native_transaction_amounts(foreign) == (100, 10)
    assert native_transaction_amounts(no_original_adjustment) == (100, 0)
    assert native_transaction_amounts(base_only) == (1000, 100)


def test_transaction_entry_amount_projects_base_and_native() -> None:
    """Entry amounts should expose effective base and native figures."""
    foreign = _transaction(
        amount=2150,
        adjustment_amount=215,
        original_amount=100,
        original_adjustment_amount=10,
        original_currency_id="usd",
        exchange_rate=RATE,
    )

    projected = transaction_entry_amount(foreign)
    base_only = transaction_entry_amount(_transaction(adjustment_amount=50))

    assert projected.base == 1935
    assert projected.native == 90
    assert projected.currency_id == "usd"
    assert projected.has_native
    assert base_only.base == 950
    assert base_only.native is None
    assert not base_only.has_native


def test_transfer_entry_amount_uses_principal() -> None:
    """Transfer projections show the principal, never leg adjustments."""
    transfer = Transfer(
        id="tr1",
        transfer_date=date(2024, 3, 1),
        from_asset_id="a",
        to_asset_id="b",
        amount=5000,
        from_adjustment_amount=300,
    )

    projected = transfer_entry_amount(transfer)

    assert projected.base == 5000
    assert projected.native is None


def test_reconcile_input_for_base_currency_asset() -> None:
    """Base-currency input should be stored unchanged."""
    reconciled = reconcile_input(1000, 100, None)

    assert reconciled.amount == 1000
    assert reconciled.adjustment_amount == 100
    assert reconciled.original_amount is None
    assert reconciled.original_adjustment_amount is None
    assert reconciled.original_currency_id is None
    assert reconciled.exchange_rate is None


def test_reconcile_input_for_foreign_asset_snapshots_rate() -> None:
    """Foreign input should be converted and keep its native snapshot."""
    dollar = Currency(id="usd", name="Dollar", symbol="$", exchange_rate=RATE)

    with_adjustment = reconcile_input(100, 10, dollar)
    without_adjustment = reconcile_input(100, 0, dollar)

    assert with_adjustment.amount == 2150
    assert with_adjustment.adjustment_amount == 215
    assert with_adjustment.original_amount == 100
    assert with_adjustment.original_adjustment_amount == 10
    assert with_adjustment.original_currency_id == "usd"
    assert with_adjustment.exchange_rate == RATE
    assert without_adjustment.adjustment_amount == 0
    assert without_adjustment.original_adjustment_amount is None
