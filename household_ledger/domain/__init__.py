"""Domain package for ledger rules and core models."""

from .errors import (
    BackendUnavailableError,
    CurrencyLookupError,
    LedgerError,
    NotFoundError,
    ReferentialBlockError,
    ValidationError,
)
from .models import (
    Asset,
    AssetBalance,
    AssetBalancesView,
    AssetCategory,
    Category,
    Currency,
    LedgerFilter,
    LedgerSummary,
    LedgerView,
    Transaction,
    Transfer,
)
from .services import (
    BalanceContext,
    CurrencyRegistry,
    build_ledger_view,
    compute_asset_balance,
    convert_from_base,
    convert_to_base,
    effective_amount,
)

__all__ = [
    "BackendUnavailableError",
    "CurrencyLookupError",
    "LedgerError",
    "NotFoundError",
    "ReferentialBlockError",
    "ValidationError",
    "Asset",
    "AssetBalance",
    "AssetBalancesView",
    "AssetCategory",
    "Category",
    "Currency",
    "LedgerFilter",
    "LedgerSummary",
    "LedgerView",
    "Transaction",
    "Transfer",
    "BalanceContext",
    "CurrencyRegistry",
    "build_ledger_view",
    "compute_asset_balance",
    "convert_from_base",
    "convert_to_base",
    "effective_amount",
]
