"""Tests for the ManageCurrenciesUseCase."""

from decimal import Decimal

import pytest

from household_ledger.application.use_cases.manage_currencies import (
    ManageCurrenciesUseCase,
)
from household_ledger.domain.errors import (
    NotFoundError,
    ReferentialBlockError,
    ValidationError,
)


@pytest.fixture
def currencies(seeded, fake_logger):
    return ManageCurrenciesUseCase(seeded, logger=fake_logger)


def test_create_appends_and_normalizes_rate(currencies) -> None:
    """New currencies go last with a Decimal rate."""
    created = currencies.create("Yen", "¥", "9.5")

    assert created.sort_order == 1
    assert created.exchange_rate == Decimal("9.5")
    assert [c.id for c in currencies.list_currencies()] == ["usd", created.id]


@pytest.mark.parametrize("rate", [0, "-1"])
def test_create_rejects_non_positive_rate(currencies, rate) -> None:
    """Exchange rates must be strictly positive."""
    with pytest.raises(ValidationError):
        currencies.create("Broken", "?", rate)


def test_update_changes_rate(currencies) -> None:
    """Rate edits are stored; untouched fields are kept."""
    updated = currencies.update("usd", exchange_rate=Decimal("1400"))

    assert updated.exchange_rate == Decimal("1400")
    assert updated.symbol == "$"
    with pytest.raises(NotFoundError):
        currencies.update("eur", name="Euro")


def test_delete_is_blocked_while_assets_use_currency(currencies, seeded) -> None:
    """Currencies referenced by live assets cannot be deleted."""
    with pytest.raises(ReferentialBlockError):
        currencies.delete("usd")

    seeded.soft_delete_asset("dollars")
    currencies.delete("usd")

    assert currencies.list_currencies() == []
