"""Domain models for aggregated ledger views and balances."""

from dataclasses import dataclass, field
from datetime import date

from household_ledger.domain.constants import EXPENSE, INCOME, TRANSFER
from household_ledger.domain.models.records import Asset, Transaction, Transfer
from household_ledger.utils.date_utils import month_range


@dataclass(frozen=True)
class EntryAmount:
    """Display projection of an entry's money.

    Attributes:
        base: Effective amount in base currency (principal for transfers).
        native: Effective amount in the recorded auxiliary currency, if any.
        currency_id: Currency of ``native``.
    """

    base: int
    native: int | None = None
    currency_id: str | None = None

    @property
    def has_native(self) -> bool:
        """Return True when a native-currency figure is available."""
        return self.native is not None


@dataclass(frozen=True)
class LedgerEntry:
    """Tagged ledger entry over a transaction or a transfer.

    Attributes:
        entry_id: Tagged id (``tx-<id>`` or ``tr-<id>``).
        entry_type: income, expense or transfer.
        entry_date: Date the entry belongs to.
        sort_order: Manual position within the date.
        amount: Display projection of the entry's money.
        record: Underlying transaction or transfer.
    """

    entry_id: str
    entry_type: str
    entry_date: date
    sort_order: int
    amount: EntryAmount
    record: Transaction | Transfer

    @property
    def is_transfer(self) -> bool:
        return self.entry_type == TRANSFER

    @property
    def contribution(self) -> int | None:
        """Signed effect on income/expense totals; None for transfers."""
        if self.entry_type == INCOME:
            return self.amount.base
        if self.entry_type == EXPENSE:
            return -self.amount.base
        return None


@dataclass(frozen=True)
class LedgerSummary:
    """Income, expense and balance totals in base currency."""

    total_income: int = 0
    total_expense: int = 0

    @property
    def balance(self) -> int:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class DateGroup:
    """Entries of one date with their own summary."""

    entry_date: date
    entries: list[LedgerEntry]
    summary: LedgerSummary


@dataclass(frozen=True)
class LedgerView:
    """Date-grouped ledger with a whole-window summary.

    ``groups`` is ordered most recent date first.
    """

    groups: list[DateGroup]
    summary: LedgerSummary

    @property
    def entries_by_date(self) -> dict[date, list[LedgerEntry]]:
        return {group.entry_date: group.entries for group in self.groups}


@dataclass(frozen=True)
class LedgerFilter:
    """Window and selection applied when building a ledger view.

    Attributes:
        start_date: Inclusive lower bound, None for unbounded.
        end_date: Inclusive upper bound, None for unbounded.
        entry_type: Keep only income, expense or transfer entries.
        category_id: Keep only transactions of this category.
        asset_id: Keep only entries touching this asset.
    """

    start_date: date | None = None
    end_date: date | None = None
    entry_type: str | None = None
    category_id: str | None = None
    asset_id: str | None = None

    @classmethod
    def for_month(cls, year: int, month: int, **kwargs) -> "LedgerFilter":
        """Build a filter covering one calendar month."""
        start, end = month_range(year, month)
        return cls(start_date=start, end_date=end, **kwargs)


@dataclass(frozen=True)
class AssetBalance:
    """Derived balance of a single asset.

    Attributes:
        asset: Asset the balance belongs to.
        balance: Balance in the asset's own currency.
        base_balance: Balance converted to base currency.
    """

    asset: Asset
    balance: int
    base_balance: int


@dataclass(frozen=True)
class AssetBalancesView:
    """Balances of all live assets and their base-currency total."""

    balances: list[AssetBalance] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(item.base_balance for item in self.balances)


__all__ = [
    "EntryAmount",
    "LedgerEntry",
    "LedgerSummary",
    "DateGroup",
    "LedgerView",
    "LedgerFilter",
    "AssetBalance",
    "AssetBalancesView",
]
