"""Input validation for ledger writes."""

from decimal import Decimal
from logging import Logger

from household_ledger.domain.constants import TRANSACTION_TYPES
from household_ledger.domain.errors import ValidationError
from household_ledger.domain.models.records import (
    Asset,
    AssetCategory,
    Category,
    Currency,
)
from household_ledger.utils.decimal_utils import coerce_decimal


def validate_transaction_type(entry_type: str) -> None:
    """Reject anything other than income or expense."""
    if entry_type not in TRANSACTION_TYPES:
        raise ValidationError(f"Unknown transaction type: {entry_type}")


def validate_positive_amount(amount: int, label: str = "amount") -> None:
    """Reject zero or negative principal amounts."""
    if amount <= 0:
        raise ValidationError(f"{label} must be positive: {amount}")


def validate_non_negative(value: int, label: str) -> None:
    """Reject negative figures."""
    if value < 0:
        raise ValidationError(f"{label} must not be negative: {value}")


def validate_adjustment(
    adjustment: int,
    amount: int,
    logger: Logger,
    label: str = "adjustment",
) -> None:
    """Reject negative adjustments and warn when one exceeds the amount.

    An adjustment larger than the amount is accepted; the entry's
    effective amount is then negative.
    """
    validate_non_negative(adjustment, label)
    if adjustment > amount:
        logger.warning(
            f"{label} {adjustment} exceeds amount {amount}; "
            "effective amount will be negative"
        )


def validate_required_text(value: str | None, label: str) -> str:
    """Return the stripped value or reject a blank one."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{label} is required")
    return cleaned


def validate_live_asset(asset: Asset | None, asset_id: str) -> Asset:
    """Return the asset or reject a missing or soft-deleted one."""
    if asset is None or asset.is_deleted:
        raise ValidationError(f"Asset not found: {asset_id}")
    return asset


def validate_asset_category(
    category: AssetCategory | None,
    category_id: str,
) -> AssetCategory:
    """Return the asset category or reject a missing one."""
    if category is None:
        raise ValidationError(f"Asset category not found: {category_id}")
    return category


def validate_currency_reference(
    currency: Currency | None,
    currency_id: str,
) -> Currency:
    """Return the currency an asset points at or reject a missing one."""
    if currency is None:
        raise ValidationError(f"Currency not found: {currency_id}")
    return currency


def validate_category_for_type(
    category: Category | None,
    category_id: str,
    entry_type: str,
) -> Category:
    """Ensure the category exists, is live and matches the entry type."""
    if category is None or category.is_deleted:
        raise ValidationError(f"Category not found: {category_id}")
    if category.kind != entry_type:
        raise ValidationError(
            f"Category {category_id} is an {category.kind} category, "
            f"not {entry_type}"
        )
    return category


def validate_transfer_legs(from_asset_id: str, to_asset_id: str) -> None:
    """Reject transfers whose legs are the same asset."""
    if from_asset_id == to_asset_id:
        raise ValidationError("Cannot transfer to the same asset")


def validate_exchange_rate(rate) -> Decimal:
    """Return the rate as Decimal or reject a non-positive one."""
    resolved = coerce_decimal(rate)
    if resolved <= 0:
        raise ValidationError(f"Exchange rate must be positive: {resolved}")
    return resolved


def validate_replacement_category(
    category_id: str,
    replacement: Category | None,
    replacement_id: str,
    kind: str,
) -> Category:
    """Check the category that takes over a deleted one's transactions."""
    if replacement_id == category_id:
        raise ValidationError("Replacement category must differ from the deleted one")
    if replacement is None or replacement.is_deleted:
        raise ValidationError(f"Replacement category not found: {replacement_id}")
    if replacement.kind != kind:
        raise ValidationError(
            f"Replacement category {replacement_id} is not an {kind} category"
        )
    return replacement


__all__ = [
    "validate_transaction_type",
    "validate_positive_amount",
    "validate_non_negative",
    "validate_adjustment",
    "validate_required_text",
    "validate_live_asset",
    "validate_asset_category",
    "validate_currency_reference",
    "validate_category_for_type",
    "validate_transfer_legs",
    "validate_exchange_rate",
    "validate_replacement_category",
]
