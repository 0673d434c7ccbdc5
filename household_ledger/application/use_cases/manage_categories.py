"""Use case managing income and expense categories."""

from dataclasses import replace
from uuid import uuid4

from household_ledger.application.ports.reference_repository import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    ReferenceDataRepositoryPort,
)
from household_ledger.domain.constants import (
    DEFAULT_EXPENSE_EMOJI,
    DEFAULT_INCOME_EMOJI,
    EXPENSE,
    INCOME,
)
from household_ledger.domain.errors import NotFoundError
from household_ledger.domain.models import Category
from household_ledger.domain.services.sequencing import sort_order_after
from household_ledger.domain.services.validation import (
    validate_replacement_category,
    validate_required_text,
    validate_transaction_type,
)
from household_ledger.infrastructure.logging.logger import get_activity_logger

_RECORD_SETS = {INCOME: INCOME_CATEGORIES, EXPENSE: EXPENSE_CATEGORIES}


class ManageCategoriesUseCase:
    """List, create, edit and retire income or expense categories."""

    def __init__(
        self,
        reference_repository: ReferenceDataRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            reference_repository: Port for category records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reference_repository = reference_repository
        self._logger = logger or get_activity_logger()

    def list_categories(self, kind: str) -> list[Category]:
        """Return non-deleted categories of one kind in display order."""
        validate_transaction_type(kind)
        return self._reference_repository.fetch_categories(kind)

    def create(self, kind: str, name: str, emoji: str | None = None) -> Category:
        """Append a new category after the existing ones.

        Args:
            kind: income or expense.
            name: Display name.
            emoji: Optional glyph; a per-kind default is used when omitted.

        Returns:
            Category: The stored record.
        """
        validate_transaction_type(kind)
        cleaned = validate_required_text(name, "name")
        existing = self._reference_repository.fetch_max_sort_order(
            _record_set(kind)
        )
        category = Category(
            id=uuid4().hex,
            kind=kind,
            name=cleaned,
            emoji=emoji or _default_emoji(kind),
            sort_order=sort_order_after(existing),
        )
        self._reference_repository.insert_category(category)
        self._logger.info(f"Created {kind} category {category.id} '{cleaned}'")
        return category

    def update(
        self,
        kind: str,
        category_id: str,
        name: str,
        emoji: str | None = None,
    ) -> Category:
        """Rename a category and optionally change its emoji.

        Raises:
            NotFoundError: If the category does not exist or is deleted.
        """
        current = self._require(kind, category_id)
        updated = replace(
            current,
            name=validate_required_text(name, "name"),
            emoji=emoji or current.emoji,
        )
        self._reference_repository.update_category(updated)
        self._logger.info(f"Updated {kind} category {category_id}")
        return updated

    def delete(self, kind: str, category_id: str, replacement_id: str) -> int:
        """Move a category's transactions to a replacement, then retire it.

        Transactions keep their amounts, so income and expense totals are
        unchanged by the move.

        Args:
            kind: income or expense.
            category_id: Category to soft-delete.
            replacement_id: Live category of the same kind.

        Returns:
            int: Number of reassigned transactions.

        Raises:
            NotFoundError: If the category does not exist or is deleted.
            ValidationError: If the replacement is unusable.
        """
        self._require(kind, category_id)
        replacement = self._reference_repository.fetch_category(kind, replacement_id)
        validate_replacement_category(category_id, replacement, replacement_id, kind)
        moved = self._reference_repository.reassign_and_soft_delete_category(
            kind, category_id, replacement_id
        )
        self._logger.info(
            f"Deleted {kind} category {category_id}; "
            f"moved {moved} transactions to {replacement_id}"
        )
        return moved

    def _require(self, kind: str, category_id: str) -> Category:
        validate_transaction_type(kind)
        category = self._reference_repository.fetch_category(kind, category_id)
        if category is None or category.is_deleted:
            raise NotFoundError(f"Category not found: {category_id}")
        return category


def _record_set(kind: str) -> str:
    return _RECORD_SETS[kind]


def _default_emoji(kind: str) -> str:
    return DEFAULT_INCOME_EMOJI if kind == INCOME else DEFAULT_EXPENSE_EMOJI


__all__ = ["ManageCategoriesUseCase"]
