"""Use case to build date-grouped ledger views."""

from household_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_ledger.domain.constants import TRANSACTION_TYPES, TRANSFER
from household_ledger.domain.models import LedgerFilter, LedgerView
from household_ledger.domain.services.ledger import build_ledger_view
from household_ledger.domain.services.validation import validate_transaction_type
from household_ledger.infrastructure.logging.logger import get_app_logger


class GetLedgerViewUseCase:
    """Read transactions and transfers and group them for display."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port for transactions and transfers.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, ledger_filter: LedgerFilter | None = None) -> LedgerView:
        """Return the ledger view for a filter.

        The repository is asked for the narrowest candidate set the filter
        allows; the domain filter is then applied again in memory.

        Args:
            ledger_filter: Optional date window and selection.

        Returns:
            LedgerView: Date groups with per-day and window summaries.
        """
        active = ledger_filter or LedgerFilter()
        transactions = []
        if active.entry_type is None or active.entry_type in TRANSACTION_TYPES:
            transactions = self._ledger_repository.fetch_transactions(
                active.start_date,
                active.end_date,
                asset_id=active.asset_id,
                category_id=active.category_id,
                entry_type=active.entry_type,
            )
        transfers = []
        if active.category_id is None and active.entry_type in (None, TRANSFER):
            transfers = self._ledger_repository.fetch_transfers(
                active.start_date,
                active.end_date,
                asset_id=active.asset_id,
            )
        view = build_ledger_view(transactions, transfers, active)
        self._logger.info(
            f"Built ledger view with {len(view.groups)} days "
            f"({len(transactions)} transactions, {len(transfers)} transfers)"
        )
        return view

    def for_month(self, year: int, month: int) -> LedgerView:
        """Return the ledger of one calendar month."""
        return self.execute(LedgerFilter.for_month(year, month))

    def for_asset(self, asset_id: str) -> LedgerView:
        """Return every entry touching an asset, including both transfer legs."""
        return self.execute(LedgerFilter(asset_id=asset_id))

    def for_category(self, category_id: str, entry_type: str) -> LedgerView:
        """Return every transaction of one income or expense category."""
        validate_transaction_type(entry_type)
        return self.execute(
            LedgerFilter(category_id=category_id, entry_type=entry_type)
        )


__all__ = ["GetLedgerViewUseCase"]
