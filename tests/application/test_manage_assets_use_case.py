"""Tests for the asset and asset category use cases."""

import pytest

from household_ledger.application.use_cases.manage_assets import (
    ManageAssetCategoriesUseCase,
    ManageAssetsUseCase,
)
from household_ledger.domain.errors import (
    NotFoundError,
    ReferentialBlockError,
    ValidationError,
)


@pytest.fixture
def assets(seeded, fake_logger):
    return ManageAssetsUseCase(seeded, logger=fake_logger)


@pytest.fixture
def asset_categories(seeded, fake_logger):
    return ManageAssetCategoriesUseCase(seeded, logger=fake_logger)


def test_create_appends_within_category(assets, asset_categories) -> None:
    """Sort orders are scoped to the owning category."""
    bank = asset_categories.create("Bank")
    in_cash = assets.create("cash", "Coin jar")
    in_bank = assets.create(bank.id, "Checking", initial_balance=250000)

    assert bank.sort_order == 1
    assert in_cash.sort_order == 2
    assert in_bank.sort_order == 0
    assert in_bank.initial_balance == 250000
    assert in_bank in assets.list_assets()


def test_create_rejects_unknown_references(assets) -> None:
    """Assets need an existing category and currency."""
    with pytest.raises(ValidationError, match="Asset category not found"):
        assets.create("nowhere", "Lost")
    with pytest.raises(ValidationError, match="Currency not found"):
        assets.create("cash", "Euros", currency_id="eur")
    assert [asset.id for asset in assets.list_assets()] == ["wallet", "dollars"]


def test_update_rejects_unknown_references(assets) -> None:
    """Moving an asset to a missing category or currency is a bad write."""
    with pytest.raises(ValidationError, match="Asset category not found"):
        assets.update("wallet", category_id="nowhere")
    with pytest.raises(ValidationError, match="Currency not found"):
        assets.update("wallet", currency_id="eur")

    wallet = next(a for a in assets.list_assets() if a.id == "wallet")
    assert wallet.category_id == "cash"
    assert wallet.currency_id is None


def test_update_changes_only_given_fields(assets) -> None:
    """Partial updates leave unspecified fields alone."""
    renamed = assets.update("dollars", name="Travel money")
    rebalanced = assets.update("dollars", initial_balance=250)
    to_base = assets.update("dollars", currency_id=None)

    assert renamed.currency_id == "usd"
    assert rebalanced.name == "Travel money"
    assert rebalanced.currency_id == "usd"
    assert to_base.currency_id is None
    assert to_base.initial_balance == 250


def test_update_missing_asset_raises(assets) -> None:
    """Unknown or deleted assets cannot be updated."""
    assets.delete("wallet")

    with pytest.raises(NotFoundError):
        assets.update("wallet", name="Wallet")
    with pytest.raises(NotFoundError):
        assets.update("ghost", name="Ghost")


def test_soft_delete_hides_asset(assets) -> None:
    """Deleted assets disappear from listings."""
    assets.delete("wallet")

    assert [asset.id for asset in assets.list_assets()] == ["dollars"]


def test_asset_category_delete_is_blocked_by_live_assets(
    assets, asset_categories
) -> None:
    """A category holding live assets cannot be deleted."""
    with pytest.raises(ReferentialBlockError):
        asset_categories.delete("cash")

    assets.delete("wallet")
    assets.delete("dollars")
    asset_categories.delete("cash")

    assert asset_categories.list_categories() == []


def test_asset_category_rename(asset_categories) -> None:
    """Renaming keeps the id and order."""
    renamed = asset_categories.rename("cash", "Pocket money")

    assert renamed.name == "Pocket money"
    assert renamed.sort_order == 0
    with pytest.raises(NotFoundError):
        asset_categories.rename("ghost", "Ghost")
