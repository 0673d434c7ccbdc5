"""Port for transactions and transfers."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from household_ledger.domain.models import SortOrderUpdate, Transaction, Transfer


class LedgerRepositoryPort(Protocol):
    """Port exposing reads and writes of ledger entries."""

    def fetch_transactions(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        *,
        asset_id: str | None = None,
        category_id: str | None = None,
        entry_type: str | None = None,
    ) -> list[Transaction]:
        """Return transactions, newest date first, then by sort order."""

    def fetch_transaction(self, transaction_id: str) -> Transaction | None:
        """Return one transaction, or None when missing."""

    def insert_transaction(self, transaction: Transaction) -> None:
        """Persist a new transaction."""

    def update_transaction(self, transaction: Transaction) -> None:
        """Overwrite a transaction's fields, sort order excluded."""

    def delete_transaction(self, transaction_id: str) -> None:
        """Hard-delete a transaction."""

    def fetch_transfers(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        *,
        asset_id: str | None = None,
    ) -> list[Transfer]:
        """Return transfers, newest date first, then by sort order."""

    def fetch_transfer(self, transfer_id: str) -> Transfer | None:
        """Return one transfer, or None when missing."""

    def insert_transfer(self, transfer: Transfer) -> None:
        """Persist a new transfer."""

    def update_transfer(self, transfer: Transfer) -> None:
        """Overwrite a transfer's fields, sort order excluded."""

    def delete_transfer(self, transfer_id: str) -> None:
        """Hard-delete a transfer."""

    def fetch_max_transaction_sort_order(self, on_date: date) -> int | None:
        """Return the highest transaction sort order on a date."""

    def fetch_max_transfer_sort_order(self, on_date: date) -> int | None:
        """Return the highest transfer sort order on a date."""

    def apply_day_reorder(
        self,
        transaction_updates: Sequence[SortOrderUpdate],
        transfer_updates: Sequence[SortOrderUpdate],
    ) -> None:
        """Write both update lists in one datastore transaction."""


__all__ = ["LedgerRepositoryPort"]
