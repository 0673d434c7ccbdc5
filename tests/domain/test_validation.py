"""Tests for ledger input validation."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from household_ledger.domain.constants import EXPENSE, INCOME
from household_ledger.domain.errors import ValidationError
from household_ledger.domain.models import Asset, AssetCategory, Category, Currency
from household_ledger.domain.services.validation import (
    validate_adjustment,
    validate_asset_category,
    validate_category_for_type,
    validate_currency_reference,
    validate_exchange_rate,
    validate_live_asset,
    validate_positive_amount,
    validate_replacement_category,
    validate_required_text,
    validate_transaction_type,
    validate_transfer_legs,
)

FOOD = Category(id="food", kind=EXPENSE, name="Food", emoji="🍚")
MISC = Category(id="misc", kind=EXPENSE, name="Misc", emoji="📦")


def test_transaction_type_must_be_income_or_expense() -> None:
    """Transfers are not a transaction type."""
    validate_transaction_type(INCOME)
    validate_transaction_type(EXPENSE)
    with pytest.raises(ValidationError):
        validate_transaction_type("transfer")


def test_positive_amount_rejects_zero() -> None:
    """Principal amounts must be strictly positive."""
    validate_positive_amount(1)
    with pytest.raises(ValidationError):
        validate_positive_amount(0)


def test_adjustment_larger_than_amount_only_warns() -> None:
    """Oversized adjustments are accepted with a warning."""
    logger = MagicMock()

    validate_adjustment(150, 100, logger)
    validate_adjustment(50, 100, logger)

    logger.warning.assert_called_once()


def test_negative_adjustment_is_rejected() -> None:
    """Adjustments are magnitudes and cannot be negative."""
    with pytest.raises(ValidationError):
        validate_adjustment(-1, 100, MagicMock())


def test_required_text_is_stripped() -> None:
    """Blank names are refused and others trimmed."""
    assert validate_required_text("  Lunch ", "title") == "Lunch"
    with pytest.raises(ValidationError):
        validate_required_text("   ", "title")
    with pytest.raises(ValidationError):
        validate_required_text(None, "title")


def test_live_asset_rejects_missing_and_deleted() -> None:
    """Entries may only be written against live assets."""
    asset = Asset(id="a", category_id="c", name="A")

    assert validate_live_asset(asset, "a") is asset
    with pytest.raises(ValidationError):
        validate_live_asset(None, "a")
    with pytest.raises(ValidationError):
        validate_live_asset(Asset(id="a", category_id="c", name="A", is_deleted=True), "a")


def test_asset_references_must_exist() -> None:
    """Missing asset categories and currencies are rejected as bad input."""
    cash = AssetCategory(id="cash", name="Cash")
    usd = Currency(id="usd", name="Dollar", symbol="$", exchange_rate=Decimal("1300"))

    assert validate_asset_category(cash, "cash") is cash
    assert validate_currency_reference(usd, "usd") is usd
    with pytest.raises(ValidationError):
        validate_asset_category(None, "nowhere")
    with pytest.raises(ValidationError):
        validate_currency_reference(None, "eur")


def test_category_must_match_entry_type() -> None:
    """An expense category cannot be used for income."""
    assert validate_category_for_type(FOOD, "food", EXPENSE) is FOOD
    with pytest.raises(ValidationError):
        validate_category_for_type(FOOD, "food", INCOME)
    with pytest.raises(ValidationError):
        validate_category_for_type(None, "food", EXPENSE)


def test_transfer_legs_must_differ() -> None:
    """A transfer to the same asset is meaningless."""
    validate_transfer_legs("a", "b")
    with pytest.raises(ValidationError):
        validate_transfer_legs("a", "a")


def test_exchange_rate_is_normalized() -> None:
    """Rates come back as Decimal and must be positive."""
    assert validate_exchange_rate("21.5") == Decimal("21.5")
    with pytest.raises(ValidationError):
        validate_exchange_rate(0)


def test_replacement_category_rules() -> None:
    """Replacements must be live, of the same kind and not the deleted one."""
    assert validate_replacement_category("food", MISC, "misc", EXPENSE) is MISC
    with pytest.raises(ValidationError):
        validate_replacement_category("food", FOOD, "food", EXPENSE)
    with pytest.raises(ValidationError):
        validate_replacement_category("food", None, "ghost", EXPENSE)
    with pytest.raises(ValidationError):
        validate_replacement_category(
            "food",
            Category(id="misc", kind=EXPENSE, name="Misc", emoji="📦", is_deleted=True),
            "misc",
            EXPENSE,
        )
    with pytest.raises(ValidationError):
        validate_replacement_category(
            "food",
            Category(id="salary", kind=INCOME, name="Salary", emoji="💰"),
            "salary",
            EXPENSE,
        )
