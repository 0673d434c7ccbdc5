"""Error taxonomy for ledger operations."""


class LedgerError(Exception):
    """Base class for ledger failures surfaced to callers."""


class ValidationError(LedgerError):
    """Input rejected before any write took place."""


class ReferentialBlockError(LedgerError):
    """Deletion refused because live records still reference the target."""


class NotFoundError(LedgerError):
    """A required record is missing or soft-deleted."""


class CurrencyLookupError(NotFoundError):
    """An asset or entry references a currency the registry does not hold."""

    def __init__(self, currency_id: str) -> None:
        super().__init__(f"Unknown currency: {currency_id}")
        self.currency_id = currency_id


class BackendUnavailableError(LedgerError):
    """The datastore could not be reached or failed mid-request."""


__all__ = [
    "LedgerError",
    "ValidationError",
    "ReferentialBlockError",
    "NotFoundError",
    "CurrencyLookupError",
    "BackendUnavailableError",
]
