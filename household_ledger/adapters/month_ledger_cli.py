"""CLI adapter printing one month of the ledger grouped by day."""

from household_ledger.application.use_cases.get_ledger_view import (
    GetLedgerViewUseCase,
)
from household_ledger.domain.models import Currency, LedgerEntry
from household_ledger.infrastructure.container import (
    build_database_adapter,
    build_ledger_repository,
    build_reference_repository,
)
from household_ledger.infrastructure.logging.logger import get_app_logger
from household_ledger.infrastructure.settings import LedgerSettings
from household_ledger.utils.money_format import (
    format_number,
    format_won,
    format_won_with_sign,
)


def _entry_label(entry: LedgerEntry) -> str:
    title = getattr(entry.record, "title", None)
    return title or entry.entry_type


def _entry_amount(
    entry: LedgerEntry,
    currencies: dict[str, Currency],
    suffix: str,
) -> str:
    """Render an entry's base figure, followed by its native one if recorded.

    Args:
        entry: Ledger entry to render.
        currencies: Currencies keyed by id.
        suffix: Base-currency suffix.

    Returns:
        str: e.g. ``-13,000원`` or ``-13,000원 ($10)``.
    """
    if entry.contribution is None:
        base = format_won(entry.amount.base, suffix)
    else:
        base = format_won_with_sign(entry.contribution, suffix)
    if not entry.amount.has_native:
        return base
    currency = currencies.get(entry.amount.currency_id or "")
    # Currencies deleted since the entry was recorded fall back to their id.
    if currency is None:
        symbol = f"{entry.amount.currency_id} "
    else:
        symbol = currency.symbol
    return f"{base} ({symbol}{format_number(entry.amount.native)})"


def main() -> None:
    """Build and print the ledger for LEDGER_MONTH or the current month."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    year, month = settings.resolve_month()
    db_adapter = build_database_adapter()
    reference_repository = build_reference_repository(db_adapter)
    use_case = GetLedgerViewUseCase(
        ledger_repository=build_ledger_repository(db_adapter),
        logger=logger,
    )

    view = use_case.for_month(year, month)
    currencies = {
        currency.id: currency
        for currency in reference_repository.fetch_currencies()
    }
    suffix = settings.base_currency_symbol

    print(f"Ledger {year:04d}-{month:02d}")
    for group in view.groups:
        print(
            f"{group.entry_date.isoformat()} "
            f"(income {format_won(group.summary.total_income, suffix)}, "
            f"expense {format_won(group.summary.total_expense, suffix)})"
        )
        for entry in group.entries:
            print(
                f"  [{entry.entry_type}] {_entry_label(entry)}: "
                f"{_entry_amount(entry, currencies, suffix)}"
            )
    print(
        f"Income: {format_won(view.summary.total_income, suffix)} | "
        f"Expense: {format_won(view.summary.total_expense, suffix)} | "
        f"Balance: {format_won_with_sign(view.summary.balance, suffix)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
