"""SQLAlchemy-backed repository for currencies, assets and categories."""

from collections.abc import Sequence

from sqlalchemy import text

from household_ledger.application.ports.database import DatabaseEnginePort
from household_ledger.application.ports.reference_repository import (
    ASSET_CATEGORIES,
    ASSETS,
    CURRENCIES,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    ORDERED_RECORD_SETS,
    ReferenceDataRepositoryPort,
)
from household_ledger.domain.constants import EXPENSE, INCOME
from household_ledger.domain.errors import ValidationError
from household_ledger.domain.models import (
    Asset,
    AssetCategory,
    Category,
    Currency,
    SortOrderUpdate,
)
from household_ledger.infrastructure.db import backend_errors
from household_ledger.utils.decimal_utils import coerce_decimal

CATEGORY_TABLES = {
    INCOME: INCOME_CATEGORIES,
    EXPENSE: EXPENSE_CATEGORIES,
}

SELECT_CURRENCIES_SQL = """
    SELECT id, name, symbol, exchange_rate, sort_order
    FROM currencies
"""

SELECT_ASSET_CATEGORIES_SQL = """
    SELECT id, name, sort_order
    FROM asset_categories
"""

SELECT_ASSETS_SQL = """
    SELECT id, category_id, currency_id, name, initial_balance,
           sort_order, is_deleted
    FROM assets
"""

INSERT_CURRENCY_SQL = text(
    """
    INSERT INTO currencies (id, name, symbol, exchange_rate, sort_order)
    VALUES (:id, :name, :symbol, :exchange_rate, :sort_order)
    """
)

UPDATE_CURRENCY_SQL = text(
    """
    UPDATE currencies
    SET name = :name, symbol = :symbol, exchange_rate = :exchange_rate
    WHERE id = :id
    """
)

INSERT_ASSET_CATEGORY_SQL = text(
    """
    INSERT INTO asset_categories (id, name, sort_order)
    VALUES (:id, :name, :sort_order)
    """
)

INSERT_ASSET_SQL = text(
    """
    INSERT INTO assets (
        id, category_id, currency_id, name, initial_balance,
        sort_order, is_deleted
    )
    VALUES (
        :id, :category_id, :currency_id, :name, :initial_balance,
        :sort_order, :is_deleted
    )
    """
)

UPDATE_ASSET_SQL = text(
    """
    UPDATE assets
    SET category_id = :category_id,
        currency_id = :currency_id,
        name = :name,
        initial_balance = :initial_balance
    WHERE id = :id
    """
)


class SqlAlchemyReferenceRepository(ReferenceDataRepositoryPort):
    """Repository backed by SQLAlchemy for ledger reference data."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_currencies(self) -> list[Currency]:
        query = text(SELECT_CURRENCIES_SQL + " ORDER BY sort_order, name")
        return [self._to_currency(row) for row in self._all(query, {}, "fetch_currencies")]

    def fetch_currency(self, currency_id: str) -> Currency | None:
        query = text(SELECT_CURRENCIES_SQL + " WHERE id = :id")
        row = self._first(query, {"id": currency_id}, "fetch_currency")
        return self._to_currency(row) if row else None

    def insert_currency(self, currency: Currency) -> None:
        self._write(
            INSERT_CURRENCY_SQL,
            {
                "id": currency.id,
                "name": currency.name,
                "symbol": currency.symbol,
                "exchange_rate": str(currency.exchange_rate),
                "sort_order": currency.sort_order,
            },
            "insert_currency",
        )

    def update_currency(self, currency: Currency) -> None:
        self._write(
            UPDATE_CURRENCY_SQL,
            {
                "id": currency.id,
                "name": currency.name,
                "symbol": currency.symbol,
                "exchange_rate": str(currency.exchange_rate),
            },
            "update_currency",
        )

    def delete_currency(self, currency_id: str) -> None:
        self._write(
            text("DELETE FROM currencies WHERE id = :id"),
            {"id": currency_id},
            "delete_currency",
        )

    def count_live_assets(
        self,
        *,
        currency_id: str | None = None,
        category_id: str | None = None,
    ) -> int:
        query = text(
            "SELECT COUNT(*) AS live_count FROM assets WHERE is_deleted = :is_deleted"
        )
        params: dict[str, object] = {"is_deleted": False}
        if currency_id is not None:
            query = text(query.text + " AND currency_id = :currency_id")
            params["currency_id"] = currency_id
        if category_id is not None:
            query = text(query.text + " AND category_id = :category_id")
            params["category_id"] = category_id
        row = self._first(query, params, "count_live_assets")
        return int(row.live_count) if row else 0

    def fetch_asset_categories(self) -> list[AssetCategory]:
        query = text(SELECT_ASSET_CATEGORIES_SQL + " ORDER BY sort_order, name")
        return [
            self._to_asset_category(row)
            for row in self._all(query, {}, "fetch_asset_categories")
        ]

    def fetch_asset_category(self, category_id: str) -> AssetCategory | None:
        query = text(SELECT_ASSET_CATEGORIES_SQL + " WHERE id = :id")
        row = self._first(query, {"id": category_id}, "fetch_asset_category")
        return self._to_asset_category(row) if row else None

    def insert_asset_category(self, category: AssetCategory) -> None:
        self._write(
            INSERT_ASSET_CATEGORY_SQL,
            {
                "id": category.id,
                "name": category.name,
                "sort_order": category.sort_order,
            },
            "insert_asset_category",
        )

    def update_asset_category(self, category: AssetCategory) -> None:
        self._write(
            text("UPDATE asset_categories SET name = :name WHERE id = :id"),
            {"id": category.id, "name": category.name},
            "update_asset_category",
        )

    def delete_asset_category(self, category_id: str) -> None:
        self._write(
            text("DELETE FROM asset_categories WHERE id = :id"),
            {"id": category_id},
            "delete_asset_category",
        )

    def fetch_assets(self, include_deleted: bool = False) -> list[Asset]:
        query = text(SELECT_ASSETS_SQL)
        params: dict[str, object] = {}
        if not include_deleted:
            query = text(query.text + " WHERE is_deleted = :is_deleted")
            params["is_deleted"] = False
        query = text(query.text + " ORDER BY sort_order, name")
        return [self._to_asset(row) for row in self._all(query, params, "fetch_assets")]

    def fetch_asset(self, asset_id: str) -> Asset | None:
        query = text(SELECT_ASSETS_SQL + " WHERE id = :id")
        row = self._first(query, {"id": asset_id}, "fetch_asset")
        return self._to_asset(row) if row else None

    def insert_asset(self, asset: Asset) -> None:
        self._write(
            INSERT_ASSET_SQL,
            {
                "id": asset.id,
                "category_id": asset.category_id,
                "currency_id": asset.currency_id,
                "name": asset.name,
                "initial_balance": asset.initial_balance,
                "sort_order": asset.sort_order,
                "is_deleted": asset.is_deleted,
            },
            "insert_asset",
        )

    def update_asset(self, asset: Asset) -> None:
        self._write(
            UPDATE_ASSET_SQL,
            {
                "id": asset.id,
                "category_id": asset.category_id,
                "currency_id": asset.currency_id,
                "name": asset.name,
                "initial_balance": asset.initial_balance,
            },
            "update_asset",
        )

    def soft_delete_asset(self, asset_id: str) -> None:
        self._write(
            text("UPDATE assets SET is_deleted = :is_deleted WHERE id = :id"),
            {"id": asset_id, "is_deleted": True},
            "soft_delete_asset",
        )

    def fetch_categories(
        self,
        kind: str,
        include_deleted: bool = False,
    ) -> list[Category]:
        table = self._category_table(kind)
        query = text(
            f"SELECT id, name, emoji, sort_order, is_deleted FROM {table}"
        )
        params: dict[str, object] = {}
        if not include_deleted:
            query = text(query.text + " WHERE is_deleted = :is_deleted")
            params["is_deleted"] = False
        query = text(query.text + " ORDER BY sort_order, name")
        return [
            self._to_category(row, kind)
            for row in self._all(query, params, "fetch_categories")
        ]

    def fetch_category(self, kind: str, category_id: str) -> Category | None:
        table = self._category_table(kind)
        query = text(
            f"SELECT id, name, emoji, sort_order, is_deleted FROM {table} "
            "WHERE id = :id"
        )
        row = self._first(query, {"id": category_id}, "fetch_category")
        return self._to_category(row, kind) if row else None

    def insert_category(self, category: Category) -> None:
        table = self._category_table(category.kind)
        query = text(
            f"INSERT INTO {table} (id, name, emoji, sort_order, is_deleted) "
            "VALUES (:id, :name, :emoji, :sort_order, :is_deleted)"
        )
        self._write(
            query,
            {
                "id": category.id,
                "name": category.name,
                "emoji": category.emoji,
                "sort_order": category.sort_order,
                "is_deleted": category.is_deleted,
            },
            "insert_category",
        )

    def update_category(self, category: Category) -> None:
        table = self._category_table(category.kind)
        query = text(f"UPDATE {table} SET name = :name, emoji = :emoji WHERE id = :id")
        self._write(
            query,
            {"id": category.id, "name": category.name, "emoji": category.emoji},
            "update_category",
        )

    def reassign_and_soft_delete_category(
        self,
        kind: str,
        category_id: str,
        replacement_id: str,
    ) -> int:
        table = self._category_table(kind)
        reassign = text(
            """
            UPDATE transactions
            SET category_id = :replacement_id
            WHERE category_id = :category_id AND type = :kind
            """
        )
        soft_delete = text(f"UPDATE {table} SET is_deleted = :is_deleted WHERE id = :id")
        engine = self._db_port.get_engine()
        with backend_errors("reassign_and_soft_delete_category"), engine.begin() as conn:
            result = conn.execute(
                reassign,
                {
                    "replacement_id": replacement_id,
                    "category_id": category_id,
                    "kind": kind,
                },
            )
            moved = result.rowcount
            conn.execute(soft_delete, {"id": category_id, "is_deleted": True})
        return moved

    def fetch_max_sort_order(
        self,
        record_set: str,
        category_id: str | None = None,
    ) -> int | None:
        table = self._ordered_table(record_set)
        query = text(f"SELECT MAX(sort_order) AS max_order FROM {table}")
        params: dict[str, object] = {}
        if category_id is not None:
            if table != ASSETS:
                raise ValidationError(f"{table} has no category scope")
            query = text(query.text + " WHERE category_id = :category_id")
            params["category_id"] = category_id
        row = self._first(query, params, "fetch_max_sort_order")
        if row is None or row.max_order is None:
            return None
        return int(row.max_order)

    def update_sort_orders(
        self,
        record_set: str,
        updates: Sequence[SortOrderUpdate],
    ) -> None:
        table = self._ordered_table(record_set)
        if not updates:
            return
        order_only = text(f"UPDATE {table} SET sort_order = :sort_order WHERE id = :id")
        with_category = text(
            f"UPDATE {table} SET sort_order = :sort_order, "
            "category_id = :category_id WHERE id = :id"
        )
        engine = self._db_port.get_engine()
        with backend_errors("update_sort_orders"), engine.begin() as conn:
            for update in updates:
                if update.category_id is not None and table == ASSETS:
                    conn.execute(
                        with_category,
                        {
                            "id": update.id,
                            "sort_order": update.sort_order,
                            "category_id": update.category_id,
                        },
                    )
                else:
                    conn.execute(
                        order_only,
                        {"id": update.id, "sort_order": update.sort_order},
                    )

    def _all(self, query, params: dict, operation: str) -> list:
        engine = self._db_port.get_engine()
        with backend_errors(operation), engine.connect() as conn:
            return conn.execute(query, params).all()

    def _first(self, query, params: dict, operation: str):
        engine = self._db_port.get_engine()
        with backend_errors(operation), engine.connect() as conn:
            return conn.execute(query, params).first()

    def _write(self, query, params: dict, operation: str) -> None:
        engine = self._db_port.get_engine()
        with backend_errors(operation), engine.begin() as conn:
            conn.execute(query, params)

    @staticmethod
    def _category_table(kind: str) -> str:
        try:
            return CATEGORY_TABLES[kind]
        except KeyError:
            raise ValidationError(f"Unknown category kind: {kind}") from None

    @staticmethod
    def _ordered_table(record_set: str) -> str:
        if record_set not in ORDERED_RECORD_SETS:
            raise ValidationError(f"Unknown record set: {record_set}")
        return record_set

    @staticmethod
    def _to_currency(row) -> Currency:
        return Currency(
            id=row.id,
            name=row.name,
            symbol=row.symbol,
            exchange_rate=coerce_decimal(row.exchange_rate),
            sort_order=int(row.sort_order),
        )

    @staticmethod
    def _to_asset_category(row) -> AssetCategory:
        return AssetCategory(
            id=row.id,
            name=row.name,
            sort_order=int(row.sort_order),
        )

    @staticmethod
    def _to_asset(row) -> Asset:
        return Asset(
            id=row.id,
            category_id=row.category_id,
            currency_id=row.currency_id,
            name=row.name,
            initial_balance=int(row.initial_balance),
            sort_order=int(row.sort_order),
            is_deleted=bool(row.is_deleted),
        )

    @staticmethod
    def _to_category(row, kind: str) -> Category:
        return Category(
            id=row.id,
            kind=kind,
            name=row.name,
            emoji=row.emoji,
            sort_order=int(row.sort_order),
            is_deleted=bool(row.is_deleted),
        )


__all__ = ["SqlAlchemyReferenceRepository", "CATEGORY_TABLES"]
