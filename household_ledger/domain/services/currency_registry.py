"""Registry of auxiliary currencies keyed by id."""

from collections.abc import Iterable, Iterator
from decimal import Decimal

from household_ledger.domain.errors import CurrencyLookupError
from household_ledger.domain.models.records import Currency


class CurrencyRegistry:
    """In-memory lookup of currencies and their exchange rates.

    A missing id always raises; callers pass ``None`` to mean the base
    currency, which is the only case resolved without a lookup.
    """

    def __init__(self, currencies: Iterable[Currency] = ()) -> None:
        self._currencies = {currency.id: currency for currency in currencies}

    def get(self, currency_id: str) -> Currency:
        """Return the currency with the given id.

        Raises:
            CurrencyLookupError: If the id is unknown.
        """
        try:
            return self._currencies[currency_id]
        except KeyError:
            raise CurrencyLookupError(currency_id) from None

    def resolve(self, currency_id: str | None) -> Currency | None:
        """Return the currency, or None for the base currency."""
        if currency_id is None:
            return None
        return self.get(currency_id)

    def rate_for(self, currency_id: str | None) -> Decimal | None:
        """Return the exchange rate, or None for the base currency."""
        currency = self.resolve(currency_id)
        return currency.exchange_rate if currency is not None else None

    def __contains__(self, currency_id: object) -> bool:
        return currency_id in self._currencies

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies.values())

    def __len__(self) -> int:
        return len(self._currencies)


__all__ = ["CurrencyRegistry"]
