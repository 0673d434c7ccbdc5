"""Asset balances derived from the full transaction and transfer history.

No balance is ever stored: every figure here is recomputed from the
asset's initial balance plus all entries touching it.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from logging import Logger

from household_ledger.domain.constants import INCOME
from household_ledger.domain.models.ledger import AssetBalance, AssetBalancesView
from household_ledger.domain.models.records import Asset, Transaction, Transfer
from household_ledger.domain.services.amounts import (
    effective_amount,
    from_base,
    native_transaction_amounts,
    to_base,
)
from household_ledger.domain.services.currency_registry import CurrencyRegistry


@dataclass(frozen=True)
class BalanceContext:
    """Ledger history needed to derive balances.

    Attributes:
        transactions: Every transaction, regardless of date.
        transfers: Every transfer, regardless of date.
        registry: Currencies referenced by assets.
    """

    transactions: Sequence[Transaction] = field(default_factory=tuple)
    transfers: Sequence[Transfer] = field(default_factory=tuple)
    registry: CurrencyRegistry = field(default_factory=CurrencyRegistry)


def compute_balance(
    asset: Asset,
    transactions: Iterable[Transaction],
    transfers: Iterable[Transfer],
    registry: CurrencyRegistry,
) -> int:
    """Compute an asset's balance in its own currency.

    Args:
        asset: Asset to compute.
        transactions: Transactions to scan; others' assets are ignored.
        transfers: Transfers to scan; only legs on this asset count.
        registry: Currency lookup for the asset's currency.

    Returns:
        int: Balance, possibly negative.

    Raises:
        CurrencyLookupError: If the asset's currency is unknown.
    """
    registry.resolve(asset.currency_id)
    balance = asset.initial_balance

    for transaction in transactions:
        if transaction.asset_id != asset.id:
            continue
        amount, adjustment = native_transaction_amounts(transaction)
        effective = effective_amount(amount, adjustment)
        if transaction.type == INCOME:
            balance += effective
        else:
            balance -= effective

    for transfer in transfers:
        if asset.id not in (transfer.from_asset_id, transfer.to_asset_id):
            continue
        moved = from_base(transfer.amount, asset.currency_id, registry)
        if transfer.from_asset_id == asset.id:
            balance -= moved
            balance += transfer.from_delta
        if transfer.to_asset_id == asset.id:
            balance += moved
            balance += transfer.to_delta

    return balance


def compute_asset_balance(asset: Asset, ctx: BalanceContext) -> int:
    """Compute one asset's balance from a balance context."""
    return compute_balance(asset, ctx.transactions, ctx.transfers, ctx.registry)


def compute_asset_balances(
    assets: Iterable[Asset],
    ctx: BalanceContext,
    logger: Logger | None = None,
) -> AssetBalancesView:
    """Compute balances for every live asset.

    History is indexed by asset once so each asset only scans its own
    entries; the result is identical to calling compute_asset_balance
    per asset.

    Args:
        assets: Assets to compute; soft-deleted ones are skipped.
        ctx: Ledger history and currencies.
        logger: Optional logger for overdraft notices.

    Returns:
        AssetBalancesView: Native and base balances in input order.
    """
    transactions_by_asset: dict[str, list[Transaction]] = defaultdict(list)
    for transaction in ctx.transactions:
        transactions_by_asset[transaction.asset_id].append(transaction)
    transfers_by_asset: dict[str, list[Transfer]] = defaultdict(list)
    for transfer in ctx.transfers:
        transfers_by_asset[transfer.from_asset_id].append(transfer)
        if transfer.to_asset_id != transfer.from_asset_id:
            transfers_by_asset[transfer.to_asset_id].append(transfer)

    balances = []
    for asset in assets:
        if asset.is_deleted:
            continue
        balance = compute_balance(
            asset,
            transactions_by_asset.get(asset.id, ()),
            transfers_by_asset.get(asset.id, ()),
            ctx.registry,
        )
        base_balance = to_base(balance, asset.currency_id, ctx.registry)
        if balance < 0 and logger is not None:
            logger.info(f"Asset {asset.id} is overdrawn: {balance}")
        balances.append(
            AssetBalance(asset=asset, balance=balance, base_balance=base_balance)
        )
    return AssetBalancesView(balances=balances)


__all__ = [
    "BalanceContext",
    "compute_balance",
    "compute_asset_balance",
    "compute_asset_balances",
]
