"""Manual sort-order assignment for day lists and display lists."""

from collections.abc import Iterable, Sequence

from household_ledger.domain.constants import (
    TRANSACTION_ENTRY_PREFIX,
    TRANSFER_ENTRY_PREFIX,
)
from household_ledger.domain.errors import ValidationError
from household_ledger.domain.models.records import SortOrderUpdate


def next_sort_order(existing: Iterable[int]) -> int:
    """Return the position after the highest existing one, 0 when empty."""
    orders = list(existing)
    return max(orders) + 1 if orders else 0


def sort_order_after(max_order: int | None) -> int:
    """Return the position after a stored maximum, 0 when there is none."""
    return max_order + 1 if max_order is not None else 0


def move_item(ids: Sequence[str], old_index: int, new_index: int) -> list[str]:
    """Return a copy of ids with one element moved to a new index."""
    moved = list(ids)
    item = moved.pop(old_index)
    moved.insert(new_index, item)
    return moved


def assign_sort_orders(
    ids: Sequence[str],
    category_id: str | None = None,
) -> list[SortOrderUpdate]:
    """Assign zero-based positions following the given order.

    Args:
        ids: Record ids in their new display order.
        category_id: Optional owning category, for assets moved between
            categories while being reordered.

    Returns:
        list[SortOrderUpdate]: One update per id.

    Raises:
        ValidationError: If an id appears twice.
    """
    _ensure_unique(ids)
    return [
        SortOrderUpdate(id=record_id, sort_order=index, category_id=category_id)
        for index, record_id in enumerate(ids)
    ]


def split_day_reorder(
    entry_ids: Sequence[str],
) -> tuple[list[SortOrderUpdate], list[SortOrderUpdate]]:
    """Split a combined day order into transaction and transfer updates.

    Positions are taken from the combined list, so a transfer placed
    between two transactions keeps its slot once both record sets are
    written.

    Args:
        entry_ids: Tagged ledger entry ids (``tx-`` / ``tr-``) in order.

    Returns:
        tuple: Transaction updates and transfer updates.

    Raises:
        ValidationError: On duplicate or untagged ids.
    """
    _ensure_unique(entry_ids)
    transaction_updates: list[SortOrderUpdate] = []
    transfer_updates: list[SortOrderUpdate] = []
    for index, entry_id in enumerate(entry_ids):
        if entry_id.startswith(TRANSACTION_ENTRY_PREFIX):
            record_id = entry_id[len(TRANSACTION_ENTRY_PREFIX):]
            transaction_updates.append(SortOrderUpdate(id=record_id, sort_order=index))
        elif entry_id.startswith(TRANSFER_ENTRY_PREFIX):
            record_id = entry_id[len(TRANSFER_ENTRY_PREFIX):]
            transfer_updates.append(SortOrderUpdate(id=record_id, sort_order=index))
        else:
            raise ValidationError(f"Unrecognized ledger entry id: {entry_id}")
    return transaction_updates, transfer_updates


def _ensure_unique(ids: Sequence[str]) -> None:
    if len(set(ids)) != len(ids):
        raise ValidationError("Reorder list contains duplicate ids")


__all__ = [
    "next_sort_order",
    "sort_order_after",
    "move_item",
    "assign_sort_orders",
    "split_day_reorder",
]
