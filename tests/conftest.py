"""Shared fixtures for ledger tests."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from household_ledger.domain.constants import EXPENSE, INCOME
from household_ledger.domain.models import (
    Asset,
    AssetCategory,
    Category,
    Currency,
)
from household_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from household_ledger.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from household_ledger.infrastructure.reference_repository import (
    SqlAlchemyReferenceRepository,
)
from household_ledger.infrastructure.schema import ensure_schema


@pytest.fixture
def engine():
    """In-memory SQLite engine with the ledger schema."""
    sqlite_engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    ensure_schema(sqlite_engine)
    yield sqlite_engine
    sqlite_engine.dispose()


@pytest.fixture
def db_port(engine):
    """Database port bound to the in-memory engine."""
    return SqlAlchemyDatabaseEngineAdapter(engine)


@pytest.fixture
def reference_repository(db_port):
    return SqlAlchemyReferenceRepository(db_port)


@pytest.fixture
def ledger_repository(db_port):
    return SqlAlchemyLedgerRepository(db_port)


@pytest.fixture
def fake_logger():
    return MagicMock()


@pytest.fixture
def seeded(reference_repository):
    """Seed one base-currency wallet, one USD account and two categories each."""
    reference_repository.insert_currency(
        Currency(id="usd", name="US Dollar", symbol="$", exchange_rate=Decimal("1300"))
    )
    reference_repository.insert_asset_category(
        AssetCategory(id="cash", name="Cash")
    )
    reference_repository.insert_asset(
        Asset(id="wallet", category_id="cash", name="Wallet", initial_balance=10000)
    )
    reference_repository.insert_asset(
        Asset(
            id="dollars",
            category_id="cash",
            name="Dollar account",
            currency_id="usd",
            initial_balance=100,
            sort_order=1,
        )
    )
    reference_repository.insert_category(
        Category(id="salary", kind=INCOME, name="Salary", emoji="💰")
    )
    reference_repository.insert_category(
        Category(id="bonus", kind=INCOME, name="Bonus", emoji="🎁", sort_order=1)
    )
    reference_repository.insert_category(
        Category(id="food", kind=EXPENSE, name="Food", emoji="🍚")
    )
    reference_repository.insert_category(
        Category(id="misc", kind=EXPENSE, name="Misc", emoji="📦", sort_order=1)
    )
    return reference_repository
