"""Domain records mirroring the ledger's stored rows."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Currency:
    """Auxiliary currency with a fixed rate to the base currency.

    Attributes:
        id: Record identifier.
        name: Display name.
        symbol: Symbol shown next to native amounts.
        exchange_rate: Base-currency units worth one unit of this currency.
        sort_order: Manual display order.
    """

    id: str
    name: str
    symbol: str
    exchange_rate: Decimal
    sort_order: int = 0


@dataclass(frozen=True)
class AssetCategory:
    """Display group for assets."""

    id: str
    name: str
    sort_order: int = 0


@dataclass(frozen=True)
class Asset:
    """Account-like holder of money.

    Attributes:
        id: Record identifier.
        category_id: Owning asset category.
        name: Display name.
        currency_id: Auxiliary currency, None for base currency.
        initial_balance: Opening balance in the asset's own currency.
        sort_order: Manual display order within the category.
        is_deleted: Soft-delete flag.
    """

    id: str
    category_id: str
    name: str
    currency_id: str | None = None
    initial_balance: int = 0
    sort_order: int = 0
    is_deleted: bool = False


@dataclass(frozen=True)
class Category:
    """Income or expense category.

    Attributes:
        id: Record identifier.
        kind: Namespace, either income or expense.
        name: Display name.
        emoji: Display glyph.
        sort_order: Manual display order.
        is_deleted: Soft-delete flag.
    """

    id: str
    kind: str
    name: str
    emoji: str
    sort_order: int = 0
    is_deleted: bool = False


@dataclass(frozen=True)
class Transaction:
    """Income or expense event on one asset.

    ``amount`` and ``adjustment_amount`` are always base currency. The
    ``original_*`` fields and ``exchange_rate`` are a snapshot of the
    native-currency input when the asset carried an auxiliary currency.
    """

    id: str
    type: str
    transaction_date: date
    asset_id: str
    category_id: str
    amount: int
    title: str
    adjustment_amount: int = 0
    adjustment_memo: str | None = None
    original_amount: int | None = None
    original_adjustment_amount: int | None = None
    original_currency_id: str | None = None
    exchange_rate: Decimal | None = None
    memo: str | None = None
    sort_order: int = 0

    @property
    def has_native_figures(self) -> bool:
        """Return True when native-currency figures were recorded."""
        return self.original_amount is not None


@dataclass(frozen=True)
class Transfer:
    """Money moved from one asset to another.

    ``amount`` is base currency. Each leg carries its own adjustment in
    that leg asset's native currency; ``*_adjustment_is_plus`` selects the
    sign of the delta.
    """

    id: str
    transfer_date: date
    from_asset_id: str
    to_asset_id: str
    amount: int
    original_amount: int | None = None
    original_currency_id: str | None = None
    exchange_rate: Decimal | None = None
    from_adjustment_amount: int = 0
    from_adjustment_is_plus: bool = False
    from_adjustment_memo: str | None = None
    to_adjustment_amount: int = 0
    to_adjustment_is_plus: bool = False
    to_adjustment_memo: str | None = None
    title: str | None = None
    memo: str | None = None
    sort_order: int = 0

    @property
    def from_delta(self) -> int:
        """Signed adjustment applied to the source leg."""
        return _signed(self.from_adjustment_amount, self.from_adjustment_is_plus)

    @property
    def to_delta(self) -> int:
        """Signed adjustment applied to the destination leg."""
        return _signed(self.to_adjustment_amount, self.to_adjustment_is_plus)


@dataclass(frozen=True)
class SortOrderUpdate:
    """New manual position for one record."""

    id: str
    sort_order: int
    category_id: str | None = None


def _signed(amount: int, is_plus: bool) -> int:
    return amount if is_plus else -amount


__all__ = [
    "Currency",
    "AssetCategory",
    "Asset",
    "Category",
    "Transaction",
    "Transfer",
    "SortOrderUpdate",
]
