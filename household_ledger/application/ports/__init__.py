"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort
from .reference_repository import (
    ASSET_CATEGORIES,
    ASSETS,
    CURRENCIES,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    ORDERED_RECORD_SETS,
    ReferenceDataRepositoryPort,
)

__all__ = [
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "ReferenceDataRepositoryPort",
    "ASSET_CATEGORIES",
    "ASSETS",
    "CURRENCIES",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "ORDERED_RECORD_SETS",
]
