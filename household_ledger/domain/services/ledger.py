"""Unified, date-grouped ledger over transactions and transfers."""

from collections.abc import Iterable
from datetime import date

from household_ledger.domain.constants import (
    EXPENSE,
    INCOME,
    TRANSACTION_ENTRY_PREFIX,
    TRANSFER,
    TRANSFER_ENTRY_PREFIX,
)
from household_ledger.domain.models.ledger import (
    DateGroup,
    LedgerEntry,
    LedgerFilter,
    LedgerSummary,
    LedgerView,
)
from household_ledger.domain.models.records import Transaction, Transfer
from household_ledger.domain.services.amounts import (
    transaction_entry_amount,
    transfer_entry_amount,
)

_KIND_RANK = {INCOME: 0, EXPENSE: 0, TRANSFER: 1}


def to_ledger_entries(
    transactions: Iterable[Transaction],
    transfers: Iterable[Transfer],
) -> list[LedgerEntry]:
    """Wrap transactions and transfers into tagged ledger entries.

    Transactions come first, then transfers, each in input order.
    """
    entries = [
        LedgerEntry(
            entry_id=f"{TRANSACTION_ENTRY_PREFIX}{tx.id}",
            entry_type=tx.type,
            entry_date=tx.transaction_date,
            sort_order=tx.sort_order,
            amount=transaction_entry_amount(tx),
            record=tx,
        )
        for tx in transactions
    ]
    entries.extend(
        LedgerEntry(
            entry_id=f"{TRANSFER_ENTRY_PREFIX}{tr.id}",
            entry_type=TRANSFER,
            entry_date=tr.transfer_date,
            sort_order=tr.sort_order,
            amount=transfer_entry_amount(tr),
            record=tr,
        )
        for tr in transfers
    )
    return entries


def matches_filter(entry: LedgerEntry, ledger_filter: LedgerFilter) -> bool:
    """Return True when the entry passes every criterion of the filter."""
    if ledger_filter.start_date and entry.entry_date < ledger_filter.start_date:
        return False
    if ledger_filter.end_date and entry.entry_date > ledger_filter.end_date:
        return False
    if ledger_filter.entry_type and entry.entry_type != ledger_filter.entry_type:
        return False
    record = entry.record
    if ledger_filter.category_id:
        if entry.is_transfer:
            return False
        if record.category_id != ledger_filter.category_id:
            return False
    if ledger_filter.asset_id:
        if entry.is_transfer:
            touched = (record.from_asset_id, record.to_asset_id)
        else:
            touched = (record.asset_id,)
        if ledger_filter.asset_id not in touched:
            return False
    return True


def summarize_entries(entries: Iterable[LedgerEntry]) -> LedgerSummary:
    """Total effective income and expense; transfers contribute nothing."""
    total_income = 0
    total_expense = 0
    for entry in entries:
        if entry.entry_type == INCOME:
            total_income += entry.amount.base
        elif entry.entry_type == EXPENSE:
            total_expense += entry.amount.base
    return LedgerSummary(total_income=total_income, total_expense=total_expense)


def order_day_entries(entries: Iterable[LedgerEntry]) -> list[LedgerEntry]:
    """Order entries of a single date by manual sort order.

    Duplicated sort orders keep transactions ahead of transfers and
    otherwise preserve input order.
    """
    return sorted(
        entries,
        key=lambda entry: (entry.sort_order, _KIND_RANK[entry.entry_type]),
    )


def build_ledger_view(
    transactions: Iterable[Transaction],
    transfers: Iterable[Transfer],
    ledger_filter: LedgerFilter | None = None,
) -> LedgerView:
    """Group entries by date and summarize them.

    Args:
        transactions: Candidate transactions.
        transfers: Candidate transfers.
        ledger_filter: Optional window and selection.

    Returns:
        LedgerView: Date groups (most recent first) and the window summary.
    """
    active_filter = ledger_filter or LedgerFilter()
    entries = [
        entry
        for entry in to_ledger_entries(transactions, transfers)
        if matches_filter(entry, active_filter)
    ]

    grouped: dict[date, list[LedgerEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.entry_date, []).append(entry)

    groups = []
    for entry_date in sorted(grouped, reverse=True):
        day_entries = order_day_entries(grouped[entry_date])
        groups.append(
            DateGroup(
                entry_date=entry_date,
                entries=day_entries,
                summary=summarize_entries(day_entries),
            )
        )
    return LedgerView(groups=groups, summary=summarize_entries(entries))


__all__ = [
    "to_ledger_entries",
    "matches_filter",
    "summarize_entries",
    "order_day_entries",
    "build_ledger_view",
]
