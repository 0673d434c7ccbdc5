"""DDL for the ledger tables, portable across SQLite and PostgreSQL."""

from sqlalchemy.engine import Engine

from household_ledger.infrastructure.db import backend_errors

CREATE_CURRENCIES_SQL = """
CREATE TABLE IF NOT EXISTS currencies (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    symbol TEXT NOT NULL,
    exchange_rate NUMERIC NOT NULL,
    sort_order INTEGER NOT NULL
)
"""

CREATE_ASSET_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS asset_categories (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    sort_order INTEGER NOT NULL
)
"""

CREATE_ASSETS_SQL = """
CREATE TABLE IF NOT EXISTS assets (
    id TEXT PRIMARY KEY,
    category_id TEXT NOT NULL,
    currency_id TEXT,
    name TEXT NOT NULL,
    initial_balance BIGINT NOT NULL,
    sort_order INTEGER NOT NULL,
    is_deleted BOOLEAN NOT NULL
)
"""

CREATE_INCOME_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS income_categories (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    emoji TEXT NOT NULL,
    sort_order INTEGER NOT NULL,
    is_deleted BOOLEAN NOT NULL
)
"""

CREATE_EXPENSE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS expense_categories (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    emoji TEXT NOT NULL,
    sort_order INTEGER NOT NULL,
    is_deleted BOOLEAN NOT NULL
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    type TEXT NOT NULL,
    transaction_date DATE NOT NULL,
    asset_id TEXT NOT NULL REFERENCES assets (id),
    category_id TEXT NOT NULL,
    amount BIGINT NOT NULL,
    adjustment_amount BIGINT NOT NULL,
    adjustment_memo TEXT,
    original_amount BIGINT,
    original_adjustment_amount BIGINT,
    original_currency_id TEXT,
    exchange_rate NUMERIC,
    title TEXT NOT NULL,
    memo TEXT,
    sort_order INTEGER NOT NULL
)
"""

CREATE_TRANSFERS_SQL = """
CREATE TABLE IF NOT EXISTS transfers (
    id TEXT PRIMARY KEY,
    transfer_date DATE NOT NULL,
    from_asset_id TEXT NOT NULL REFERENCES assets (id),
    to_asset_id TEXT NOT NULL REFERENCES assets (id),
    amount BIGINT NOT NULL,
    original_amount BIGINT,
    original_currency_id TEXT,
    exchange_rate NUMERIC,
    from_adjustment_amount BIGINT NOT NULL,
    from_adjustment_is_plus BOOLEAN NOT NULL,
    from_adjustment_memo TEXT,
    to_adjustment_amount BIGINT NOT NULL,
    to_adjustment_is_plus BOOLEAN NOT NULL,
    to_adjustment_memo TEXT,
    title TEXT,
    memo TEXT,
    sort_order INTEGER NOT NULL,
    CHECK (from_asset_id <> to_asset_id)
)
"""

SCHEMA_STATEMENTS = (
    CREATE_CURRENCIES_SQL,
    CREATE_ASSET_CATEGORIES_SQL,
    CREATE_ASSETS_SQL,
    CREATE_INCOME_CATEGORIES_SQL,
    CREATE_EXPENSE_CATEGORIES_SQL,
    CREATE_TRANSACTIONS_SQL,
    CREATE_TRANSFERS_SQL,
)


def ensure_schema(engine: Engine) -> None:
    """Create the ledger tables if they do not exist.

    Args:
        engine: SQLAlchemy engine for the ledger database.
    """
    with backend_errors("ensure_schema"), engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)


__all__ = ["SCHEMA_STATEMENTS", "ensure_schema"]
