"""Use cases managing assets and their display groups."""

from dataclasses import replace
from uuid import uuid4

from household_ledger.application.ports.reference_repository import (
    ASSET_CATEGORIES,
    ASSETS,
    ReferenceDataRepositoryPort,
)
from household_ledger.domain.errors import NotFoundError, ReferentialBlockError
from household_ledger.domain.models import Asset, AssetCategory
from household_ledger.domain.services.sequencing import sort_order_after
from household_ledger.domain.services.validation import (
    validate_asset_category,
    validate_currency_reference,
    validate_required_text,
)
from household_ledger.infrastructure.logging.logger import get_activity_logger

_KEEP = object()


class ManageAssetCategoriesUseCase:
    """List, create, rename and delete asset categories."""

    def __init__(
        self,
        reference_repository: ReferenceDataRepositoryPort,
        logger=None,
    ) -> None:
        self._reference_repository = reference_repository
        self._logger = logger or get_activity_logger()

    def list_categories(self) -> list[AssetCategory]:
        return self._reference_repository.fetch_asset_categories()

    def create(self, name: str) -> AssetCategory:
        """Append a new asset category after the existing ones."""
        existing = self._reference_repository.fetch_max_sort_order(ASSET_CATEGORIES)
        category = AssetCategory(
            id=uuid4().hex,
            name=validate_required_text(name, "name"),
            sort_order=sort_order_after(existing),
        )
        self._reference_repository.insert_asset_category(category)
        self._logger.info(f"Created asset category {category.id} '{category.name}'")
        return category

    def rename(self, category_id: str, name: str) -> AssetCategory:
        """Rename an asset category.

        Raises:
            NotFoundError: If the category does not exist.
        """
        current = self._reference_repository.fetch_asset_category(category_id)
        if current is None:
            raise NotFoundError(f"Asset category not found: {category_id}")
        updated = replace(current, name=validate_required_text(name, "name"))
        self._reference_repository.update_asset_category(updated)
        self._logger.info(f"Renamed asset category {category_id}")
        return updated

    def delete(self, category_id: str) -> None:
        """Delete an asset category that holds no live assets.

        Raises:
            ReferentialBlockError: If a non-deleted asset belongs to it.
        """
        live = self._reference_repository.count_live_assets(category_id=category_id)
        if live:
            raise ReferentialBlockError(
                f"Asset category {category_id} still holds {live} assets"
            )
        self._reference_repository.delete_asset_category(category_id)
        self._logger.info(f"Deleted asset category {category_id}")


class ManageAssetsUseCase:
    """List, create, edit and soft-delete assets."""

    def __init__(
        self,
        reference_repository: ReferenceDataRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            reference_repository: Port for assets, categories and currencies.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reference_repository = reference_repository
        self._logger = logger or get_activity_logger()

    def list_assets(self) -> list[Asset]:
        """Return non-deleted assets in display order."""
        return self._reference_repository.fetch_assets()

    def create(
        self,
        category_id: str,
        name: str,
        initial_balance: int = 0,
        currency_id: str | None = None,
    ) -> Asset:
        """Append a new asset to the end of its category.

        Args:
            category_id: Owning asset category.
            name: Display name.
            initial_balance: Opening balance in the asset's currency.
            currency_id: Auxiliary currency, None for base currency.

        Returns:
            Asset: The stored record.

        Raises:
            ValidationError: If the category or currency does not exist.
        """
        self._require_category(category_id)
        self._require_currency(currency_id)
        existing = self._reference_repository.fetch_max_sort_order(
            ASSETS, category_id=category_id
        )
        asset = Asset(
            id=uuid4().hex,
            category_id=category_id,
            name=validate_required_text(name, "name"),
            currency_id=currency_id,
            initial_balance=initial_balance,
            sort_order=sort_order_after(existing),
        )
        self._reference_repository.insert_asset(asset)
        self._logger.info(
            f"Created asset {asset.id} '{asset.name}' "
            f"with initial balance {initial_balance}"
        )
        return asset

    def update(
        self,
        asset_id: str,
        *,
        name: str | None = None,
        initial_balance: int | None = None,
        category_id: str | None = None,
        currency_id=_KEEP,
    ) -> Asset:
        """Change the given fields of an asset, leaving the others.

        ``currency_id=None`` switches the asset to base currency; omit it
        to keep the current currency. Past entries keep the figures they
        were recorded with.

        Raises:
            NotFoundError: If the asset does not exist or is deleted.
            ValidationError: If a new category or currency does not exist.
        """
        current = self._reference_repository.fetch_asset(asset_id)
        if current is None or current.is_deleted:
            raise NotFoundError(f"Asset not found: {asset_id}")
        updated = current
        if name is not None:
            updated = replace(updated, name=validate_required_text(name, "name"))
        if initial_balance is not None:
            updated = replace(updated, initial_balance=initial_balance)
        if category_id is not None:
            self._require_category(category_id)
            updated = replace(updated, category_id=category_id)
        if currency_id is not _KEEP:
            self._require_currency(currency_id)
            updated = replace(updated, currency_id=currency_id)
        self._reference_repository.update_asset(updated)
        self._logger.info(f"Updated asset {asset_id}")
        return updated

    def delete(self, asset_id: str) -> None:
        """Soft-delete an asset; its history stays in the ledger."""
        self._reference_repository.soft_delete_asset(asset_id)
        self._logger.info(f"Soft-deleted asset {asset_id}")

    def _require_category(self, category_id: str) -> None:
        validate_asset_category(
            self._reference_repository.fetch_asset_category(category_id),
            category_id,
        )

    def _require_currency(self, currency_id: str | None) -> None:
        if currency_id is None:
            return
        validate_currency_reference(
            self._reference_repository.fetch_currency(currency_id),
            currency_id,
        )


__all__ = ["ManageAssetCategoriesUseCase", "ManageAssetsUseCase"]
