"""Use cases writing manual display order."""

from collections.abc import Sequence

from household_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_ledger.application.ports.reference_repository import (
    ASSETS,
    ORDERED_RECORD_SETS,
    ReferenceDataRepositoryPort,
)
from household_ledger.domain.errors import ValidationError
from household_ledger.domain.services.sequencing import (
    assign_sort_orders,
    split_day_reorder,
)
from household_ledger.infrastructure.logging.logger import get_activity_logger


class ReorderDayEntriesUseCase:
    """Persist the order of one day's mixed transactions and transfers."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_activity_logger()

    def execute(self, entry_ids: Sequence[str]) -> None:
        """Write ``sort_order = index`` for every tagged entry id.

        Args:
            entry_ids: ``tx-``/``tr-`` ledger entry ids of one date in
                their new order.
        """
        transaction_updates, transfer_updates = split_day_reorder(entry_ids)
        self._ledger_repository.apply_day_reorder(
            transaction_updates,
            transfer_updates,
        )
        self._logger.info(
            f"Reordered {len(transaction_updates)} transactions and "
            f"{len(transfer_updates)} transfers"
        )


class ReorderRecordsUseCase:
    """Persist the display order of currencies, assets or categories."""

    def __init__(
        self,
        reference_repository: ReferenceDataRepositoryPort,
        logger=None,
    ) -> None:
        self._reference_repository = reference_repository
        self._logger = logger or get_activity_logger()

    def execute(
        self,
        record_set: str,
        ordered_ids: Sequence[str],
        category_id: str | None = None,
    ) -> None:
        """Write ``sort_order = index`` for every id of a record set.

        Args:
            record_set: One of the ordered record set names.
            ordered_ids: Record ids in their new order.
            category_id: For assets only, the category the listed assets
                now belong to.

        Raises:
            ValidationError: On an unknown record set, duplicate ids, or a
                category given for something other than assets.
        """
        if record_set not in ORDERED_RECORD_SETS:
            raise ValidationError(f"Unknown record set: {record_set}")
        if category_id is not None and record_set != ASSETS:
            raise ValidationError(f"{record_set} cannot be moved between categories")
        updates = assign_sort_orders(ordered_ids, category_id)
        self._reference_repository.update_sort_orders(record_set, updates)
        self._logger.info(f"Reordered {len(updates)} {record_set}")


__all__ = ["ReorderDayEntriesUseCase", "ReorderRecordsUseCase"]
