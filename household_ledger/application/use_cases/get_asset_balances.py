"""Use case to derive every live asset's balance from full history."""

from household_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_ledger.application.ports.reference_repository import (
    ReferenceDataRepositoryPort,
)
from household_ledger.domain.models import AssetBalance, AssetBalancesView
from household_ledger.domain.services.balances import (
    BalanceContext,
    compute_asset_balances,
)
from household_ledger.domain.services.currency_registry import CurrencyRegistry
from household_ledger.infrastructure.logging.logger import get_app_logger


class GetAssetBalancesUseCase:
    """Compute asset balances in native and base currency."""

    def __init__(
        self,
        reference_repository: ReferenceDataRepositoryPort,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            reference_repository: Port for assets and currencies.
            ledger_repository: Port for transactions and transfers.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reference_repository = reference_repository
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> AssetBalancesView:
        """Return balances for all non-deleted assets.

        Returns:
            AssetBalancesView: Per-asset balances and the base-currency total.
        """
        assets = self._reference_repository.fetch_assets()
        view = compute_asset_balances(assets, self._load_context(), self._logger)
        self._logger.info(
            f"Computed balances for {len(view.balances)} assets; "
            f"total {view.total}"
        )
        return view

    def execute_for_asset(self, asset_id: str) -> AssetBalance | None:
        """Return one asset's balance, or None when it is missing or deleted.

        Only the history touching this asset is loaded.
        """
        asset = self._reference_repository.fetch_asset(asset_id)
        if asset is None or asset.is_deleted:
            return None
        ctx = BalanceContext(
            transactions=self._ledger_repository.fetch_transactions(
                asset_id=asset_id
            ),
            transfers=self._ledger_repository.fetch_transfers(asset_id=asset_id),
            registry=CurrencyRegistry(self._reference_repository.fetch_currencies()),
        )
        return compute_asset_balances([asset], ctx).balances[0]

    def _load_context(self) -> BalanceContext:
        return BalanceContext(
            transactions=self._ledger_repository.fetch_transactions(),
            transfers=self._ledger_repository.fetch_transfers(),
            registry=CurrencyRegistry(self._reference_repository.fetch_currencies()),
        )


__all__ = ["GetAssetBalancesUseCase"]
