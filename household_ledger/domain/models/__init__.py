"""Domain models package."""

from .ledger import (
    AssetBalance,
    AssetBalancesView,
    DateGroup,
    EntryAmount,
    LedgerEntry,
    LedgerFilter,
    LedgerSummary,
    LedgerView,
)
from .records import (
    Asset,
    AssetCategory,
    Category,
    Currency,
    SortOrderUpdate,
    Transaction,
    Transfer,
)

__all__ = [
    "Asset",
    "AssetCategory",
    "Category",
    "Currency",
    "SortOrderUpdate",
    "Transaction",
    "Transfer",
    "AssetBalance",
    "AssetBalancesView",
    "DateGroup",
    "EntryAmount",
    "LedgerEntry",
    "LedgerFilter",
    "LedgerSummary",
    "LedgerView",
]
