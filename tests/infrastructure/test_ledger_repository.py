"""Tests for the SQLAlchemy ledger repository."""

from datetime import date
from decimal import Decimal

from household_ledger.domain.constants import EXPENSE, INCOME
from household_ledger.domain.models import SortOrderUpdate, Transaction, Transfer


def _transaction(tx_id, tx_type, on_date, **extra) -> Transaction:
    values = {
        "asset_id": "wallet",
        "category_id": "salary" if tx_type == INCOME else "food",
        "amount": 1000,
    }
    values.update(extra)
    return Transaction(
        id=tx_id,
        type=tx_type,
        transaction_date=on_date,
        title=tx_id,
        **values,
    )


def _transfer(tr_id, on_date, **extra) -> Transfer:
    values = {"from_asset_id": "wallet", "to_asset_id": "dollars", "amount": 2600}
    values.update(extra)
    return Transfer(id=tr_id, transfer_date=on_date, **values)


def test_transaction_round_trip_preserves_native_snapshot(
    seeded, ledger_repository
) -> None:
    """Stored foreign figures and rate should read back unchanged."""
    stored = _transaction(
        "t1",
        EXPENSE,
        date(2024, 3, 1),
        asset_id="dollars",
        amount=2150,
        adjustment_amount=215,
        adjustment_memo="coupon",
        original_amount=100,
        original_adjustment_amount=10,
        original_currency_id="usd",
        exchange_rate=Decimal("21.5"),
        memo="note",
        sort_order=3,
    )

    ledger_repository.insert_transaction(stored)

    assert ledger_repository.fetch_transaction("t1") == stored
    assert ledger_repository.fetch_transaction("missing") is None


def test_fetch_transactions_orders_and_filters(seeded, ledger_repository) -> None:
    """Reads are newest first, then by sort order, within the window."""
    ledger_repository.insert_transaction(
        _transaction("old", INCOME, date(2024, 2, 28))
    )
    ledger_repository.insert_transaction(
        _transaction("b", EXPENSE, date(2024, 3, 2), sort_order=1)
    )
    ledger_repository.insert_transaction(
        _transaction("a", EXPENSE, date(2024, 3, 2), sort_order=0)
    )
    ledger_repository.insert_transaction(
        _transaction("c", INCOME, date(2024, 3, 1), asset_id="dollars")
    )

    march = ledger_repository.fetch_transactions(date(2024, 3, 1), date(2024, 3, 31))
    by_asset = ledger_repository.fetch_transactions(asset_id="dollars")
    by_category = ledger_repository.fetch_transactions(
        category_id="food", entry_type=EXPENSE
    )

    assert [tx.id for tx in march] == ["a", "b", "c"]
    assert [tx.id for tx in by_asset] == ["c"]
    assert [tx.id for tx in by_category] == ["a", "b"]


def test_update_and_delete_transaction(seeded, ledger_repository) -> None:
    """Updates rewrite values but keep the stored sort order."""
    ledger_repository.insert_transaction(
        _transaction("t1", EXPENSE, date(2024, 3, 1), sort_order=4)
    )

    ledger_repository.update_transaction(
        _transaction("t1", EXPENSE, date(2024, 3, 5), amount=777, sort_order=0)
    )
    updated = ledger_repository.fetch_transaction("t1")
    ledger_repository.delete_transaction("t1")

    assert updated.amount == 777
    assert updated.transaction_date == date(2024, 3, 5)
    assert updated.sort_order == 4
    assert ledger_repository.fetch_transaction("t1") is None


def test_transfer_round_trip_and_asset_filter(seeded, ledger_repository) -> None:
    """Transfers touching an asset on either leg are returned."""
    outgoing = _transfer(
        "out",
        date(2024, 3, 1),
        from_adjustment_amount=100,
        from_adjustment_is_plus=False,
        to_adjustment_amount=1,
        to_adjustment_is_plus=True,
        title="Exchange",
    )
    incoming = _transfer(
        "in",
        date(2024, 3, 2),
        from_asset_id="dollars",
        to_asset_id="wallet",
        amount=1300,
        original_amount=1,
        original_currency_id="usd",
        exchange_rate=Decimal("1300"),
    )
    ledger_repository.insert_transfer(outgoing)
    ledger_repository.insert_transfer(incoming)

    wallet = ledger_repository.fetch_transfers(asset_id="wallet")

    assert ledger_repository.fetch_transfer("out") == outgoing
    assert ledger_repository.fetch_transfer("in") == incoming
    assert [tr.id for tr in wallet] == ["in", "out"]
    assert ledger_repository.fetch_transfers(date(2024, 3, 2), date(2024, 3, 2)) == [
        incoming
    ]


def test_max_sort_order_is_per_date(seeded, ledger_repository) -> None:
    """Maxima only consider entries on the same date."""
    ledger_repository.insert_transaction(
        _transaction("a", EXPENSE, date(2024, 3, 1), sort_order=2)
    )
    ledger_repository.insert_transfer(_transfer("tr", date(2024, 3, 1), sort_order=7))

    assert ledger_repository.fetch_max_transaction_sort_order(date(2024, 3, 1)) == 2
    assert ledger_repository.fetch_max_transaction_sort_order(date(2024, 3, 2)) is None
    assert ledger_repository.fetch_max_transfer_sort_order(date(2024, 3, 1)) == 7


def test_apply_day_reorder_updates_both_tables(seeded, ledger_repository) -> None:
    """Day reorders write transactions and transfers together."""
    day = date(2024, 3, 1)
    ledger_repository.insert_transaction(_transaction("a", EXPENSE, day))
    ledger_repository.insert_transfer(_transfer("b", day))

    ledger_repository.apply_day_reorder(
        [SortOrderUpdate(id="a", sort_order=1)],
        [SortOrderUpdate(id="b", sort_order=0)],
    )

    assert ledger_repository.fetch_transaction("a").sort_order == 1
    assert ledger_repository.fetch_transfer("b").sort_order == 0
