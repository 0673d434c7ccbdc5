"""Use cases creating, editing and deleting ledger entries.

Amounts arrive in the acting asset's own currency and are reconciled to
base currency before they are stored. Balances are never written here;
they are derived on read.
"""

from dataclasses import dataclass, replace
from datetime import date
from uuid import uuid4

from household_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_ledger.application.ports.reference_repository import (
    ReferenceDataRepositoryPort,
)
from household_ledger.domain.errors import CurrencyLookupError, NotFoundError
from household_ledger.domain.models import Asset, Currency, Transaction, Transfer
from household_ledger.domain.services.amounts import reconcile_input
from household_ledger.domain.services.sequencing import sort_order_after
from household_ledger.domain.services.validation import (
    validate_adjustment,
    validate_category_for_type,
    validate_live_asset,
    validate_non_negative,
    validate_positive_amount,
    validate_required_text,
    validate_transaction_type,
    validate_transfer_legs,
)
from household_ledger.infrastructure.logging.logger import get_activity_logger


@dataclass(frozen=True)
class TransactionInput:
    """Form values for an income or expense entry.

    Attributes:
        type: income or expense.
        transaction_date: Date the entry belongs to.
        asset_id: Asset the money moves in or out of.
        category_id: Category of the matching kind.
        amount: Principal in the asset's currency.
        title: Short description.
        adjustment_amount: Discount or fee in the asset's currency.
        adjustment_memo: Free-text note on the adjustment.
        memo: Free-text note.
    """

    type: str
    transaction_date: date
    asset_id: str
    category_id: str
    amount: int
    title: str
    adjustment_amount: int = 0
    adjustment_memo: str | None = None
    memo: str | None = None


@dataclass(frozen=True)
class TransferInput:
    """Form values for a transfer between two assets.

    ``amount`` is in the source asset's currency. Each leg adjustment is
    in that leg asset's own currency.
    """

    transfer_date: date
    from_asset_id: str
    to_asset_id: str
    amount: int
    from_adjustment_amount: int = 0
    from_adjustment_is_plus: bool = False
    from_adjustment_memo: str | None = None
    to_adjustment_amount: int = 0
    to_adjustment_is_plus: bool = False
    to_adjustment_memo: str | None = None
    title: str | None = None
    memo: str | None = None


class _LedgerWriteUseCase:
    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        reference_repository: ReferenceDataRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port for transactions and transfers.
            reference_repository: Port for assets, categories and currencies.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._reference_repository = reference_repository
        self._logger = logger or get_activity_logger()

    def _live_asset(self, asset_id: str) -> Asset:
        asset = self._reference_repository.fetch_asset(asset_id)
        return validate_live_asset(asset, asset_id)

    def _asset_currency(self, asset: Asset) -> Currency | None:
        if asset.currency_id is None:
            return None
        currency = self._reference_repository.fetch_currency(asset.currency_id)
        if currency is None:
            raise CurrencyLookupError(asset.currency_id)
        return currency


class TransactionUseCase(_LedgerWriteUseCase):
    """Create, update and delete income and expense transactions."""

    def create(self, data: TransactionInput) -> Transaction:
        """Validate, reconcile and persist a new transaction.

        The entry is appended after the last one of the same date.

        Returns:
            Transaction: The stored record.
        """
        transaction = self._build(uuid4().hex, data)
        existing = self._ledger_repository.fetch_max_transaction_sort_order(
            data.transaction_date
        )
        transaction = replace(transaction, sort_order=sort_order_after(existing))
        self._ledger_repository.insert_transaction(transaction)
        self._logger.info(
            f"Created {transaction.type} transaction {transaction.id} "
            f"on {transaction.transaction_date} for {transaction.amount}"
        )
        return transaction

    def update(self, transaction_id: str, data: TransactionInput) -> Transaction:
        """Replace a transaction's values, keeping its sort order.

        Raises:
            NotFoundError: If the transaction does not exist.
        """
        current = self._ledger_repository.fetch_transaction(transaction_id)
        if current is None:
            raise NotFoundError(f"Transaction not found: {transaction_id}")
        transaction = replace(
            self._build(transaction_id, data),
            sort_order=current.sort_order,
        )
        self._ledger_repository.update_transaction(transaction)
        self._logger.info(f"Updated transaction {transaction_id}")
        return transaction

    def delete(self, transaction_id: str) -> None:
        """Hard-delete a transaction."""
        self._ledger_repository.delete_transaction(transaction_id)
        self._logger.info(f"Deleted transaction {transaction_id}")

    def get(self, transaction_id: str) -> Transaction | None:
        """Return one transaction, or None when missing."""
        return self._ledger_repository.fetch_transaction(transaction_id)

    def _build(self, transaction_id: str, data: TransactionInput) -> Transaction:
        validate_transaction_type(data.type)
        validate_positive_amount(data.amount)
        validate_adjustment(data.adjustment_amount, data.amount, self._logger)
        title = validate_required_text(data.title, "title")
        asset = self._live_asset(data.asset_id)
        category = self._reference_repository.fetch_category(
            data.type, data.category_id
        )
        validate_category_for_type(category, data.category_id, data.type)

        reconciled = reconcile_input(
            data.amount,
            data.adjustment_amount,
            self._asset_currency(asset),
        )
        return Transaction(
            id=transaction_id,
            type=data.type,
            transaction_date=data.transaction_date,
            asset_id=asset.id,
            category_id=data.category_id,
            amount=reconciled.amount,
            title=title,
            adjustment_amount=reconciled.adjustment_amount,
            adjustment_memo=data.adjustment_memo or None,
            original_amount=reconciled.original_amount,
            original_adjustment_amount=reconciled.original_adjustment_amount,
            original_currency_id=reconciled.original_currency_id,
            exchange_rate=reconciled.exchange_rate,
            memo=data.memo or None,
        )


class TransferUseCase(_LedgerWriteUseCase):
    """Create, update and delete transfers between assets."""

    def create(self, data: TransferInput) -> Transfer:
        """Validate, reconcile and persist a new transfer.

        Returns:
            Transfer: The stored record.
        """
        transfer = self._build(uuid4().hex, data)
        existing = self._ledger_repository.fetch_max_transfer_sort_order(
            data.transfer_date
        )
        transfer = replace(transfer, sort_order=sort_order_after(existing))
        self._ledger_repository.insert_transfer(transfer)
        self._logger.info(
            f"Created transfer {transfer.id} from {transfer.from_asset_id} "
            f"to {transfer.to_asset_id} for {transfer.amount}"
        )
        return transfer

    def update(self, transfer_id: str, data: TransferInput) -> Transfer:
        """Replace a transfer's values, keeping its sort order.

        Raises:
            NotFoundError: If the transfer does not exist.
        """
        current = self._ledger_repository.fetch_transfer(transfer_id)
        if current is None:
            raise NotFoundError(f"Transfer not found: {transfer_id}")
        transfer = replace(
            self._build(transfer_id, data),
            sort_order=current.sort_order,
        )
        self._ledger_repository.update_transfer(transfer)
        self._logger.info(f"Updated transfer {transfer_id}")
        return transfer

    def delete(self, transfer_id: str) -> None:
        """Hard-delete a transfer."""
        self._ledger_repository.delete_transfer(transfer_id)
        self._logger.info(f"Deleted transfer {transfer_id}")

    def get(self, transfer_id: str) -> Transfer | None:
        """Return one transfer, or None when missing."""
        return self._ledger_repository.fetch_transfer(transfer_id)

    def _build(self, transfer_id: str, data: TransferInput) -> Transfer:
        validate_transfer_legs(data.from_asset_id, data.to_asset_id)
        validate_positive_amount(data.amount)
        validate_adjustment(
            data.from_adjustment_amount,
            data.amount,
            self._logger,
            "from adjustment",
        )
        validate_non_negative(data.to_adjustment_amount, "to adjustment")
        source = self._live_asset(data.from_asset_id)
        self._live_asset(data.to_asset_id)

        reconciled = reconcile_input(data.amount, 0, self._asset_currency(source))
        return Transfer(
            id=transfer_id,
            transfer_date=data.transfer_date,
            from_asset_id=data.from_asset_id,
            to_asset_id=data.to_asset_id,
            amount=reconciled.amount,
            original_amount=reconciled.original_amount,
            original_currency_id=reconciled.original_currency_id,
            exchange_rate=reconciled.exchange_rate,
            from_adjustment_amount=data.from_adjustment_amount,
            from_adjustment_is_plus=data.from_adjustment_is_plus,
            from_adjustment_memo=data.from_adjustment_memo or None,
            to_adjustment_amount=data.to_adjustment_amount,
            to_adjustment_is_plus=data.to_adjustment_is_plus,
            to_adjustment_memo=data.to_adjustment_memo or None,
            title=(data.title or "").strip() or None,
            memo=data.memo or None,
        )


__all__ = [
    "TransactionInput",
    "TransferInput",
    "TransactionUseCase",
    "TransferUseCase",
]
