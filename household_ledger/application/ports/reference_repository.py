"""Port for currencies, assets and categories."""

from collections.abc import Sequence
from typing import Protocol

from household_ledger.domain.models import (
    Asset,
    AssetCategory,
    Category,
    Currency,
    SortOrderUpdate,
)

CURRENCIES = "currencies"
ASSET_CATEGORIES = "asset_categories"
ASSETS = "assets"
INCOME_CATEGORIES = "income_categories"
EXPENSE_CATEGORIES = "expense_categories"

ORDERED_RECORD_SETS = (
    CURRENCIES,
    ASSET_CATEGORIES,
    ASSETS,
    INCOME_CATEGORIES,
    EXPENSE_CATEGORIES,
)


class ReferenceDataRepositoryPort(Protocol):
    """Port exposing the records that ledger entries point at."""

    def fetch_currencies(self) -> list[Currency]:
        """Return all currencies ordered by sort order."""

    def fetch_currency(self, currency_id: str) -> Currency | None:
        """Return one currency, or None when missing."""

    def insert_currency(self, currency: Currency) -> None:
        """Persist a new currency."""

    def update_currency(self, currency: Currency) -> None:
        """Overwrite a currency's name, symbol and rate."""

    def delete_currency(self, currency_id: str) -> None:
        """Hard-delete a currency."""

    def count_live_assets(
        self,
        *,
        currency_id: str | None = None,
        category_id: str | None = None,
    ) -> int:
        """Count non-deleted assets referencing a currency or category."""

    def fetch_asset_categories(self) -> list[AssetCategory]:
        """Return all asset categories ordered by sort order."""

    def fetch_asset_category(self, category_id: str) -> AssetCategory | None:
        """Return one asset category, or None when missing."""

    def insert_asset_category(self, category: AssetCategory) -> None:
        """Persist a new asset category."""

    def update_asset_category(self, category: AssetCategory) -> None:
        """Overwrite an asset category's name."""

    def delete_asset_category(self, category_id: str) -> None:
        """Hard-delete an asset category."""

    def fetch_assets(self, include_deleted: bool = False) -> list[Asset]:
        """Return assets ordered by sort order."""

    def fetch_asset(self, asset_id: str) -> Asset | None:
        """Return one asset, soft-deleted included, or None when missing."""

    def insert_asset(self, asset: Asset) -> None:
        """Persist a new asset."""

    def update_asset(self, asset: Asset) -> None:
        """Overwrite an asset's editable fields."""

    def soft_delete_asset(self, asset_id: str) -> None:
        """Flag an asset as deleted."""

    def fetch_categories(
        self,
        kind: str,
        include_deleted: bool = False,
    ) -> list[Category]:
        """Return income or expense categories ordered by sort order."""

    def fetch_category(self, kind: str, category_id: str) -> Category | None:
        """Return one category of the given kind, or None when missing."""

    def insert_category(self, category: Category) -> None:
        """Persist a new income or expense category."""

    def update_category(self, category: Category) -> None:
        """Overwrite a category's name and emoji."""

    def reassign_and_soft_delete_category(
        self,
        kind: str,
        category_id: str,
        replacement_id: str,
    ) -> int:
        """Move transactions to the replacement, then flag the category.

        Both steps belong to one datastore transaction.

        Returns:
            int: Number of reassigned transactions.
        """

    def fetch_max_sort_order(
        self,
        record_set: str,
        category_id: str | None = None,
    ) -> int | None:
        """Return the highest sort order in a record set, None when empty."""

    def update_sort_orders(
        self,
        record_set: str,
        updates: Sequence[SortOrderUpdate],
    ) -> None:
        """Write new sort orders for a record set in one transaction."""


__all__ = [
    "ReferenceDataRepositoryPort",
    "CURRENCIES",
    "ASSET_CATEGORIES",
    "ASSETS",
    "INCOME_CATEGORIES",
    "EXPENSE_CATEGORIES",
    "ORDERED_RECORD_SETS",
]
