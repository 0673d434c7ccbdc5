"""CLI adapter printing every live asset's balance and the net total."""

from household_ledger.application.use_cases.get_asset_balances import (
    GetAssetBalancesUseCase,
)
from household_ledger.domain.models import AssetBalance, Currency
from household_ledger.infrastructure.container import (
    build_database_adapter,
    build_ledger_repository,
    build_reference_repository,
)
from household_ledger.infrastructure.logging.logger import get_app_logger
from household_ledger.infrastructure.settings import LedgerSettings
from household_ledger.utils.money_format import format_number, format_won


def _format_line(
    item: AssetBalance,
    currencies: dict[str, Currency],
    suffix: str,
) -> str:
    """Render one asset balance, with its native figure when applicable.

    Args:
        item: Asset balance to render.
        currencies: Currencies keyed by id.
        suffix: Base-currency suffix.

    Returns:
        str: Printable line.
    """
    base = format_won(item.base_balance, suffix)
    currency = currencies.get(item.asset.currency_id or "")
    if currency is None:
        return f"{item.asset.name}: {base}"
    native = f"{currency.symbol}{format_number(item.balance)}"
    return f"{item.asset.name}: {native} ({base})"


def main() -> None:
    """Compute and print asset balances."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    db_adapter = build_database_adapter()
    reference_repository = build_reference_repository(db_adapter)
    use_case = GetAssetBalancesUseCase(
        reference_repository=reference_repository,
        ledger_repository=build_ledger_repository(db_adapter),
        logger=logger,
    )

    view = use_case.execute()
    currencies = {
        currency.id: currency
        for currency in reference_repository.fetch_currencies()
    }

    suffix = settings.base_currency_symbol
    for item in view.balances:
        print(_format_line(item, currencies, suffix))
    print(f"Total: {format_won(view.total, suffix)}")


if __name__ == "__main__":  # pragma: no cover
    main()
