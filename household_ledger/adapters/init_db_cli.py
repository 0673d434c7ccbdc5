"""CLI adapter creating the ledger tables.

This adapter is meant for local operations: it instantiates the concrete
database adapter and creates any missing table in LEDGER_DB_URL.
"""

from household_ledger.infrastructure.container import build_database_adapter
from household_ledger.infrastructure.logging.logger import get_app_logger
from household_ledger.infrastructure.schema import SCHEMA_STATEMENTS, ensure_schema


def main() -> None:
    """Create the ledger schema if it does not exist."""
    logger = get_app_logger()
    engine = build_database_adapter().get_engine()
    logger.info(f"Ledger DB: {engine.url}")

    ensure_schema(engine)

    print(f"Ensured {len(SCHEMA_STATEMENTS)} ledger tables.")


if __name__ == "__main__":  # pragma: no cover
    main()
