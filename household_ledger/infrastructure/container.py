"""Composition root for wiring infrastructure adapters."""

from household_ledger.application.ports.database import DatabaseEnginePort
from household_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_ledger.application.ports.reference_repository import (
    ReferenceDataRepositoryPort,
)
from household_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from household_ledger.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from household_ledger.infrastructure.reference_repository import (
    SqlAlchemyReferenceRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_reference_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ReferenceDataRepositoryPort:
    """Return the repository for currencies, assets and categories."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyReferenceRepository(resolved_db)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the repository for transactions and transfers."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


__all__ = [
    "build_database_adapter",
    "build_reference_repository",
    "build_ledger_repository",
]
