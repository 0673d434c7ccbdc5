"""Application use cases package."""

from .get_asset_balances import GetAssetBalancesUseCase
from .get_ledger_view import GetLedgerViewUseCase
from .manage_assets import ManageAssetCategoriesUseCase, ManageAssetsUseCase
from .manage_categories import ManageCategoriesUseCase
from .manage_currencies import ManageCurrenciesUseCase
from .manage_transactions import (
    TransactionInput,
    TransactionUseCase,
    TransferInput,
    TransferUseCase,
)
from .reorder import ReorderDayEntriesUseCase, ReorderRecordsUseCase

__all__ = [
    "GetAssetBalancesUseCase",
    "GetLedgerViewUseCase",
    "ManageAssetCategoriesUseCase",
    "ManageAssetsUseCase",
    "ManageCategoriesUseCase",
    "ManageCurrenciesUseCase",
    "TransactionInput",
    "TransactionUseCase",
    "TransferInput",
    "TransferUseCase",
    "ReorderDayEntriesUseCase",
    "ReorderRecordsUseCase",
]
