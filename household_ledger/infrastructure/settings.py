"""Settings helpers for the household ledger."""

from dataclasses import dataclass
import os

from household_ledger.infrastructure.logging.logger import get_app_logger
from household_ledger.utils.date_utils import (
    DEFAULT_TIMEZONE,
    current_year_month,
    parse_year_month,
)
from household_ledger.utils.money_format import BASE_CURRENCY_SUFFIX


@dataclass(frozen=True)
class LedgerSettings:
    """Runtime settings for ledger adapters.

    Attributes:
        timezone: IANA timezone deciding what "today" and "this month" mean.
        base_currency_symbol: Suffix printed after base-currency amounts.
        month: Optional (year, month) selected for month views.
    """

    timezone: str = DEFAULT_TIMEZONE
    base_currency_symbol: str = BASE_CURRENCY_SUFFIX
    month: tuple[int, int] | None = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        timezone = os.getenv("LEDGER_TIMEZONE", DEFAULT_TIMEZONE).strip()
        symbol = os.getenv("LEDGER_BASE_CURRENCY_SYMBOL", BASE_CURRENCY_SUFFIX)
        month = cls._parse_month(os.getenv("LEDGER_MONTH"))
        return cls(
            timezone=timezone or DEFAULT_TIMEZONE,
            base_currency_symbol=symbol,
            month=month,
        )

    def resolve_month(self) -> tuple[int, int]:
        """Return the configured month, or the current one in the timezone."""
        if self.month is not None:
            return self.month
        return current_year_month(self.timezone)

    @staticmethod
    def _parse_month(raw_month: str | None) -> tuple[int, int] | None:
        """Parse LEDGER_MONTH, warning and ignoring invalid values.

        Args:
            raw_month: Raw YYYY-MM string.

        Returns:
            tuple[int, int] | None: Parsed (year, month) when valid.
        """
        if not raw_month:
            return None
        try:
            return parse_year_month(raw_month)
        except ValueError:
            get_app_logger().warning(
                f"Invalid LEDGER_MONTH '{raw_month}'. Expected format YYYY-MM."
            )
            return None


__all__ = ["LedgerSettings"]
