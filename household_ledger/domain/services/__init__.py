"""Domain services package."""

from .amounts import (
    ReconciledAmounts,
    convert_from_base,
    convert_to_base,
    effective_amount,
    from_base,
    native_transaction_amounts,
    reconcile_input,
    to_base,
)
from .balances import (
    BalanceContext,
    compute_asset_balance,
    compute_asset_balances,
    compute_balance,
)
from .currency_registry import CurrencyRegistry
from .ledger import build_ledger_view, summarize_entries, to_ledger_entries
from .sequencing import (
    assign_sort_orders,
    move_item,
    next_sort_order,
    sort_order_after,
    split_day_reorder,
)

__all__ = [
    "ReconciledAmounts",
    "convert_from_base",
    "convert_to_base",
    "effective_amount",
    "from_base",
    "native_transaction_amounts",
    "reconcile_input",
    "to_base",
    "BalanceContext",
    "compute_asset_balance",
    "compute_asset_balances",
    "compute_balance",
    "CurrencyRegistry",
    "build_ledger_view",
    "summarize_entries",
    "to_ledger_entries",
    "assign_sort_orders",
    "move_item",
    "next_sort_order",
    "sort_order_after",
    "split_day_reorder",
]
