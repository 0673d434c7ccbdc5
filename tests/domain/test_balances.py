"""Tests for derived asset balances."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from household_ledger.domain.constants import EXPENSE, INCOME
from household_ledger.domain.errors import CurrencyLookupError
from household_ledger.domain.models import Asset, Currency, Transaction, Transfer
from household_ledger.domain.services.amounts import from_base, to_base
from household_ledger.domain.services.balances import (
    BalanceContext,
    compute_asset_balance,
    compute_asset_balances,
    compute_balance,
)
from household_ledger.domain.services.currency_registry import CurrencyRegistry

DAY = date(2024, 3, 15)
DOLLAR = Currency(id="usd", name="Dollar", symbol="$", exchange_rate=Decimal("1300"))
REGISTRY = CurrencyRegistry([DOLLAR])

WALLET = Asset(id="wallet", category_id="cash", name="Wallet", initial_balance=10000)
SAVINGS = Asset(id="savings", category_id="bank", name="Savings")
DOLLARS = Asset(
    id="dollars",
    category_id="bank",
    name="Dollar account",
    currency_id="usd",
    initial_balance=100,
)


def _transaction(tx_id: str, tx_type: str, asset_id: str, amount: int, **extra):
    return Transaction(
        id=tx_id,
        type=tx_type,
        transaction_date=DAY,
        asset_id=asset_id,
        category_id="cat",
        amount=amount,
        title=tx_id,
        **extra,
    )


def _transfer(tr_id: str, source: str, target: str, amount: int, **extra):
    return Transfer(
        id=tr_id,
        transfer_date=DAY,
        from_asset_id=source,
        to_asset_id=target,
        amount=amount,
        **extra,
    )


def test_balance_applies_effective_income_and_expense() -> None:
    """Income adds and expense subtracts effective amounts."""
    transactions = [
        _transaction("salary", INCOME, "wallet", 5000),
        _transaction("groceries", EXPENSE, "wallet", 3000, adjustment_amount=500),
        _transaction("elsewhere", EXPENSE, "savings", 999),
    ]

    balance = compute_balance(WALLET, transactions, [], REGISTRY)

    assert balance == 10000 + 5000 - 2500


def test_balance_without_history_is_initial_balance() -> None:
    """An asset with no entries keeps its opening balance."""
    assert compute_balance(WALLET, [], [], REGISTRY) == 10000


def test_transfer_between_base_assets_conserves_money() -> None:
    """A transfer without adjustments moves money without creating any."""
    transfers = [_transfer("move", "wallet", "savings", 4000)]
    ctx = BalanceContext(transfers=transfers, registry=REGISTRY)

    wallet = compute_asset_balance(WALLET, ctx)
    savings = compute_asset_balance(SAVINGS, ctx)

    assert wallet == 6000
    assert savings == 4000
    assert wallet + savings == WALLET.initial_balance + SAVINGS.initial_balance


def test_transfer_leg_adjustments_are_signed_deltas() -> None:
    """Each leg adjustment applies to its own asset with its own sign."""
    transfers = [
        _transfer(
            "move",
            "wallet",
            "savings",
            4000,
            from_adjustment_amount=100,
            from_adjustment_is_plus=False,
            to_adjustment_amount=50,
            to_adjustment_is_plus=True,
        )
    ]
    ctx = BalanceContext(transfers=transfers, registry=REGISTRY)

    assert compute_asset_balance(WALLET, ctx) == 10000 - 4000 - 100
    assert compute_asset_balance(SAVINGS, ctx) == 4000 + 50


def test_foreign_asset_balance_uses_native_figures() -> None:
    """Foreign assets accumulate recorded native amounts."""
    transactions = [
        _transaction(
            "dividend",
            INCOME,
            "dollars",
            65000,
            original_amount=50,
            original_currency_id="usd",
            exchange_rate=Decimal("1300"),
        ),
        _transaction(
            "fee",
            EXPENSE,
            "dollars",
            13000,
            adjustment_amount=1300,
            original_amount=10,
            original_adjustment_amount=1,
            original_currency_id="usd",
            exchange_rate=Decimal("1300"),
        ),
    ]

    balance = compute_balance(DOLLARS, transactions, [], REGISTRY)

    assert balance == 100 + 50 - 9


def test_transfer_into_foreign_asset_converts_principal() -> None:
    """The base principal is converted into the destination currency."""
    transfers = [_transfer("buy", "wallet", "dollars", 6500)]
    ctx = BalanceContext(transfers=transfers, registry=REGISTRY)

    assert compute_asset_balance(DOLLARS, ctx) == 105
    assert compute_asset_balance(WALLET, ctx) == 3500


def test_transfer_and_base_balance_round_like_registry_conversion() -> None:
    """Principal and base balance follow the shared half-away-from-zero rule."""
    transfers = [_transfer("buy", "wallet", "dollars", 1950)]
    ctx = BalanceContext(transfers=transfers, registry=REGISTRY)

    view = compute_asset_balances([DOLLARS], ctx)

    assert from_base(1950, "usd", REGISTRY) == 2
    assert view.balances[0].balance == 100 + 2
    assert view.balances[0].base_balance == to_base(102, "usd", REGISTRY)
    assert view.balances[0].base_balance == 132600


def test_unknown_asset_currency_raises() -> None:
    """A balance must not be computed with a missing currency."""
    orphan = Asset(id="orphan", category_id="bank", name="Orphan", currency_id="eur")

    with pytest.raises(CurrencyLookupError):
        compute_balance(orphan, [], [], REGISTRY)


def test_compute_asset_balances_skips_deleted_and_totals_base() -> None:
    """Live assets get native and base balances plus a base total."""
    closed = Asset(id="closed", category_id="cash", name="Closed", is_deleted=True)
    ctx = BalanceContext(
        transactions=[_transaction("spend", EXPENSE, "wallet", 2000)],
        transfers=[_transfer("move", "wallet", "savings", 1000)],
        registry=REGISTRY,
    )

    view = compute_asset_balances([WALLET, SAVINGS, DOLLARS, closed], ctx)

    assert [item.asset.id for item in view.balances] == [
        "wallet",
        "savings",
        "dollars",
    ]
    assert [item.balance for item in view.balances] == [7000, 1000, 100]
    assert [item.base_balance for item in view.balances] == [7000, 1000, 130000]
    assert view.total == 138000


def test_compute_asset_balances_matches_single_asset_computation() -> None:
    """Indexed computation should equal the per-asset scan."""
    ctx = BalanceContext(
        transactions=[
            _transaction("salary", INCOME, "wallet", 3000),
            _transaction("rent", EXPENSE, "savings", 1200, adjustment_amount=200),
        ],
        transfers=[
            _transfer("buy", "wallet", "dollars", 2600, to_adjustment_amount=1),
            _transfer("save", "wallet", "savings", 500),
        ],
        registry=REGISTRY,
    )

    view = compute_asset_balances([WALLET, SAVINGS, DOLLARS], ctx)

    for item in view.balances:
        assert item.balance == compute_asset_balance(item.asset, ctx)


def test_overdrawn_assets_are_logged() -> None:
    """Negative balances are allowed and reported at info level."""
    logger = MagicMock()
    ctx = BalanceContext(
        transactions=[_transaction("splurge", EXPENSE, "savings", 700)],
        registry=REGISTRY,
    )

    view = compute_asset_balances([SAVINGS], ctx, logger=logger)

    assert view.balances[0].balance == -700
    logger.info.assert_called_once()
