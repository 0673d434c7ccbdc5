"""SQLAlchemy-backed repository for transactions and transfers."""

from collections.abc import Sequence
from datetime import date

from sqlalchemy import text

from household_ledger.application.ports.database import DatabaseEnginePort
from household_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_ledger.domain.models import SortOrderUpdate, Transaction, Transfer
from household_ledger.infrastructure.db import backend_errors
from household_ledger.utils.decimal_utils import coerce_optional_decimal

SELECT_TRANSACTIONS_SQL = """
    SELECT id, type, transaction_date, asset_id, category_id, amount,
           adjustment_amount, adjustment_memo, original_amount,
           original_adjustment_amount, original_currency_id, exchange_rate,
           title, memo, sort_order
    FROM transactions
    WHERE 1=1
"""

SELECT_TRANSFERS_SQL = """
    SELECT id, transfer_date, from_asset_id, to_asset_id, amount,
           original_amount, original_currency_id, exchange_rate,
           from_adjustment_amount, from_adjustment_is_plus,
           from_adjustment_memo, to_adjustment_amount, to_adjustment_is_plus,
           to_adjustment_memo, title, memo, sort_order
    FROM transfers
    WHERE 1=1
"""

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        id, type, transaction_date, asset_id, category_id, amount,
        adjustment_amount, adjustment_memo, original_amount,
        original_adjustment_amount, original_currency_id, exchange_rate,
        title, memo, sort_order
    )
    VALUES (
        :id, :type, :transaction_date, :asset_id, :category_id, :amount,
        :adjustment_amount, :adjustment_memo, :original_amount,
        :original_adjustment_amount, :original_currency_id, :exchange_rate,
        :title, :memo, :sort_order
    )
    """
)

UPDATE_TRANSACTION_SQL = text(
    """
    UPDATE transactions
    SET type = :type,
        transaction_date = :transaction_date,
        asset_id = :asset_id,
        category_id = :category_id,
        amount = :amount,
        adjustment_amount = :adjustment_amount,
        adjustment_memo = :adjustment_memo,
        original_amount = :original_amount,
        original_adjustment_amount = :original_adjustment_amount,
        original_currency_id = :original_currency_id,
        exchange_rate = :exchange_rate,
        title = :title,
        memo = :memo
    WHERE id = :id
    """
)

INSERT_TRANSFER_SQL = text(
    """
    INSERT INTO transfers (
        id, transfer_date, from_asset_id, to_asset_id, amount,
        original_amount, original_currency_id, exchange_rate,
        from_adjustment_amount, from_adjustment_is_plus, from_adjustment_memo,
        to_adjustment_amount, to_adjustment_is_plus, to_adjustment_memo,
        title, memo, sort_order
    )
    VALUES (
        :id, :transfer_date, :from_asset_id, :to_asset_id, :amount,
        :original_amount, :original_currency_id, :exchange_rate,
        :from_adjustment_amount, :from_adjustment_is_plus, :from_adjustment_memo,
        :to_adjustment_amount, :to_adjustment_is_plus, :to_adjustment_memo,
        :title, :memo, :sort_order
    )
    """
)

UPDATE_TRANSFER_SQL = text(
    """
    UPDATE transfers
    SET transfer_date = :transfer_date,
        from_asset_id = :from_asset_id,
        to_asset_id = :to_asset_id,
        amount = :amount,
        original_amount = :original_amount,
        original_currency_id = :original_currency_id,
        exchange_rate = :exchange_rate,
        from_adjustment_amount = :from_adjustment_amount,
        from_adjustment_is_plus = :from_adjustment_is_plus,
        from_adjustment_memo = :from_adjustment_memo,
        to_adjustment_amount = :to_adjustment_amount,
        to_adjustment_is_plus = :to_adjustment_is_plus,
        to_adjustment_memo = :to_adjustment_memo,
        title = :title,
        memo = :memo
    WHERE id = :id
    """
)

UPDATE_TRANSACTION_ORDER_SQL = text(
    "UPDATE transactions SET sort_order = :sort_order WHERE id = :id"
)

UPDATE_TRANSFER_ORDER_SQL = text(
    "UPDATE transfers SET sort_order = :sort_order WHERE id = :id"
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for ledger entries."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        *,
        asset_id: str | None = None,
        category_id: str | None = None,
        entry_type: str | None = None,
    ) -> list[Transaction]:
        query = text(SELECT_TRANSACTIONS_SQL)
        params = self._build_date_params(start_date, end_date)
        if start_date:
            query = text(query.text + " AND transaction_date >= :start_date")
        if end_date:
            query = text(query.text + " AND transaction_date <= :end_date")
        if asset_id:
            query = text(query.text + " AND asset_id = :asset_id")
            params["asset_id"] = asset_id
        if category_id:
            query = text(query.text + " AND category_id = :category_id")
            params["category_id"] = category_id
        if entry_type:
            query = text(query.text + " AND type = :entry_type")
            params["entry_type"] = entry_type
        query = text(query.text + " ORDER BY transaction_date DESC, sort_order ASC")
        engine = self._db_port.get_engine()
        with backend_errors("fetch_transactions"), engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_transaction(row) for row in rows]

    def fetch_transaction(self, transaction_id: str) -> Transaction | None:
        query = text(SELECT_TRANSACTIONS_SQL + " AND id = :id")
        engine = self._db_port.get_engine()
        with backend_errors("fetch_transaction"), engine.connect() as conn:
            row = conn.execute(query, {"id": transaction_id}).first()
        return self._to_transaction(row) if row else None

    def insert_transaction(self, transaction: Transaction) -> None:
        params = self._transaction_params(transaction)
        params["sort_order"] = transaction.sort_order
        self._write(INSERT_TRANSACTION_SQL, params, "insert_transaction")

    def update_transaction(self, transaction: Transaction) -> None:
        self._write(
            UPDATE_TRANSACTION_SQL,
            self._transaction_params(transaction),
            "update_transaction",
        )

    def delete_transaction(self, transaction_id: str) -> None:
        self._write(
            text("DELETE FROM transactions WHERE id = :id"),
            {"id": transaction_id},
            "delete_transaction",
        )

    def fetch_transfers(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        *,
        asset_id: str | None = None,
    ) -> list[Transfer]:
        query = text(SELECT_TRANSFERS_SQL)
        params = self._build_date_params(start_date, end_date)
        if start_date:
            query = text(query.text + " AND transfer_date >= :start_date")
        if end_date:
            query = text(query.text + " AND transfer_date <= :end_date")
        if asset_id:
            query = text(
                query.text
                + " AND (from_asset_id = :asset_id OR to_asset_id = :asset_id)"
            )
            params["asset_id"] = asset_id
        query = text(query.text + " ORDER BY transfer_date DESC, sort_order ASC")
        engine = self._db_port.get_engine()
        with backend_errors("fetch_transfers"), engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_transfer(row) for row in rows]

    def fetch_transfer(self, transfer_id: str) -> Transfer | None:
        query = text(SELECT_TRANSFERS_SQL + " AND id = :id")
        engine = self._db_port.get_engine()
        with backend_errors("fetch_transfer"), engine.connect() as conn:
            row = conn.execute(query, {"id": transfer_id}).first()
        return self._to_transfer(row) if row else None

    def insert_transfer(self, transfer: Transfer) -> None:
        params = self._transfer_params(transfer)
        params["sort_order"] = transfer.sort_order
        self._write(INSERT_TRANSFER_SQL, params, "insert_transfer")

    def update_transfer(self, transfer: Transfer) -> None:
        self._write(
            UPDATE_TRANSFER_SQL,
            self._transfer_params(transfer),
            "update_transfer",
        )

    def delete_transfer(self, transfer_id: str) -> None:
        self._write(
            text("DELETE FROM transfers WHERE id = :id"),
            {"id": transfer_id},
            "delete_transfer",
        )

    def fetch_max_transaction_sort_order(self, on_date: date) -> int | None:
        return self._max_sort_order(
            text(
                "SELECT MAX(sort_order) AS max_order FROM transactions "
                "WHERE transaction_date = :on_date"
            ),
            on_date,
        )

    def fetch_max_transfer_sort_order(self, on_date: date) -> int | None:
        return self._max_sort_order(
            text(
                "SELECT MAX(sort_order) AS max_order FROM transfers "
                "WHERE transfer_date = :on_date"
            ),
            on_date,
        )

    def apply_day_reorder(
        self,
        transaction_updates: Sequence[SortOrderUpdate],
        transfer_updates: Sequence[SortOrderUpdate],
    ) -> None:
        if not transaction_updates and not transfer_updates:
            return
        engine = self._db_port.get_engine()
        with backend_errors("apply_day_reorder"), engine.begin() as conn:
            for update in transaction_updates:
                conn.execute(
                    UPDATE_TRANSACTION_ORDER_SQL,
                    {"id": update.id, "sort_order": update.sort_order},
                )
            for update in transfer_updates:
                conn.execute(
                    UPDATE_TRANSFER_ORDER_SQL,
                    {"id": update.id, "sort_order": update.sort_order},
                )

    def _max_sort_order(self, query, on_date: date) -> int | None:
        engine = self._db_port.get_engine()
        with backend_errors("fetch_max_sort_order"), engine.connect() as conn:
            row = conn.execute(query, {"on_date": on_date.isoformat()}).first()
        if row is None or row.max_order is None:
            return None
        return int(row.max_order)

    def _write(self, query, params: dict, operation: str) -> None:
        engine = self._db_port.get_engine()
        with backend_errors(operation), engine.begin() as conn:
            conn.execute(query, params)

    @staticmethod
    def _build_date_params(
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, object]:
        params: dict[str, object] = {}
        if start_date:
            params["start_date"] = start_date.isoformat()
        if end_date:
            params["end_date"] = end_date.isoformat()
        return params

    @staticmethod
    def _coerce_date(value) -> date:
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value)[:10])

    @staticmethod
    def _rate_param(value) -> str | None:
        return str(value) if value is not None else None

    @staticmethod
    def _optional_int(value) -> int | None:
        return int(value) if value is not None else None

    @classmethod
    def _transaction_params(cls, transaction: Transaction) -> dict[str, object]:
        return {
            "id": transaction.id,
            "type": transaction.type,
            "transaction_date": transaction.transaction_date.isoformat(),
            "asset_id": transaction.asset_id,
            "category_id": transaction.category_id,
            "amount": transaction.amount,
            "adjustment_amount": transaction.adjustment_amount,
            "adjustment_memo": transaction.adjustment_memo,
            "original_amount": transaction.original_amount,
            "original_adjustment_amount": transaction.original_adjustment_amount,
            "original_currency_id": transaction.original_currency_id,
            "exchange_rate": cls._rate_param(transaction.exchange_rate),
            "title": transaction.title,
            "memo": transaction.memo,
        }

    @classmethod
    def _transfer_params(cls, transfer: Transfer) -> dict[str, object]:
        return {
            "id": transfer.id,
            "transfer_date": transfer.transfer_date.isoformat(),
            "from_asset_id": transfer.from_asset_id,
            "to_asset_id": transfer.to_asset_id,
            "amount": transfer.amount,
            "original_amount": transfer.original_amount,
            "original_currency_id": transfer.original_currency_id,
            "exchange_rate": cls._rate_param(transfer.exchange_rate),
            "from_adjustment_amount": transfer.from_adjustment_amount,
            "from_adjustment_is_plus": transfer.from_adjustment_is_plus,
            "from_adjustment_memo": transfer.from_adjustment_memo,
            "to_adjustment_amount": transfer.to_adjustment_amount,
            "to_adjustment_is_plus": transfer.to_adjustment_is_plus,
            "to_adjustment_memo": transfer.to_adjustment_memo,
            "title": transfer.title,
            "memo": transfer.memo,
        }

    @classmethod
    def _to_transaction(cls, row) -> Transaction:
        return Transaction(
            id=row.id,
            type=row.type,
            transaction_date=cls._coerce_date(row.transaction_date),
            asset_id=row.asset_id,
            category_id=row.category_id,
            amount=int(row.amount),
            adjustment_amount=int(row.adjustment_amount),
            adjustment_memo=row.adjustment_memo,
            original_amount=cls._optional_int(row.original_amount),
            original_adjustment_amount=cls._optional_int(
                row.original_adjustment_amount
            ),
            original_currency_id=row.original_currency_id,
            exchange_rate=coerce_optional_decimal(row.exchange_rate),
            title=row.title,
            memo=row.memo,
            sort_order=int(row.sort_order),
        )

    @classmethod
    def _to_transfer(cls, row) -> Transfer:
        return Transfer(
            id=row.id,
            transfer_date=cls._coerce_date(row.transfer_date),
            from_asset_id=row.from_asset_id,
            to_asset_id=row.to_asset_id,
            amount=int(row.amount),
            original_amount=cls._optional_int(row.original_amount),
            original_currency_id=row.original_currency_id,
            exchange_rate=coerce_optional_decimal(row.exchange_rate),
            from_adjustment_amount=int(row.from_adjustment_amount),
            from_adjustment_is_plus=bool(row.from_adjustment_is_plus),
            from_adjustment_memo=row.from_adjustment_memo,
            to_adjustment_amount=int(row.to_adjustment_amount),
            to_adjustment_is_plus=bool(row.to_adjustment_is_plus),
            to_adjustment_memo=row.to_adjustment_memo,
            title=row.title,
            memo=row.memo,
            sort_order=int(row.sort_order),
        )


__all__ = ["SqlAlchemyLedgerRepository"]
