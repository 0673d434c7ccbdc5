"""Use case managing auxiliary currencies."""

from dataclasses import replace
from uuid import uuid4

from household_ledger.application.ports.reference_repository import (
    CURRENCIES,
    ReferenceDataRepositoryPort,
)
from household_ledger.domain.errors import NotFoundError, ReferentialBlockError
from household_ledger.domain.models import Currency
from household_ledger.domain.services.sequencing import sort_order_after
from household_ledger.domain.services.validation import (
    validate_exchange_rate,
    validate_required_text,
)
from household_ledger.infrastructure.logging.logger import get_activity_logger


class ManageCurrenciesUseCase:
    """List, create, edit and delete auxiliary currencies.

    Changing a rate only affects future conversions: stored entries keep
    their own rate snapshot, while balances of assets held in the
    currency are converted with the new rate.
    """

    def __init__(
        self,
        reference_repository: ReferenceDataRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            reference_repository: Port for currencies and assets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reference_repository = reference_repository
        self._logger = logger or get_activity_logger()

    def list_currencies(self) -> list[Currency]:
        """Return currencies in display order."""
        return self._reference_repository.fetch_currencies()

    def create(self, name: str, symbol: str, exchange_rate) -> Currency:
        """Append a new currency after the existing ones.

        Args:
            name: Display name.
            symbol: Symbol shown next to native amounts.
            exchange_rate: Base units per unit of this currency; must be > 0.

        Returns:
            Currency: The stored record.
        """
        existing = self._reference_repository.fetch_max_sort_order(CURRENCIES)
        currency = Currency(
            id=uuid4().hex,
            name=validate_required_text(name, "name"),
            symbol=validate_required_text(symbol, "symbol"),
            exchange_rate=validate_exchange_rate(exchange_rate),
            sort_order=sort_order_after(existing),
        )
        self._reference_repository.insert_currency(currency)
        self._logger.info(
            f"Created currency {currency.id} '{currency.name}' "
            f"at rate {currency.exchange_rate}"
        )
        return currency

    def update(
        self,
        currency_id: str,
        *,
        name: str | None = None,
        symbol: str | None = None,
        exchange_rate=None,
    ) -> Currency:
        """Change the given fields of a currency.

        Raises:
            NotFoundError: If the currency does not exist.
        """
        current = self._reference_repository.fetch_currency(currency_id)
        if current is None:
            raise NotFoundError(f"Currency not found: {currency_id}")
        updated = current
        if name is not None:
            updated = replace(updated, name=validate_required_text(name, "name"))
        if symbol is not None:
            updated = replace(
                updated, symbol=validate_required_text(symbol, "symbol")
            )
        if exchange_rate is not None:
            updated = replace(
                updated, exchange_rate=validate_exchange_rate(exchange_rate)
            )
        self._reference_repository.update_currency(updated)
        self._logger.info(f"Updated currency {currency_id}")
        return updated

    def delete(self, currency_id: str) -> None:
        """Delete a currency that no live asset uses.

        Raises:
            ReferentialBlockError: If a non-deleted asset references it.
        """
        live = self._reference_repository.count_live_assets(currency_id=currency_id)
        if live:
            raise ReferentialBlockError(
                f"Currency {currency_id} is used by {live} assets"
            )
        self._reference_repository.delete_currency(currency_id)
        self._logger.info(f"Deleted currency {currency_id}")


__all__ = ["ManageCurrenciesUseCase"]
