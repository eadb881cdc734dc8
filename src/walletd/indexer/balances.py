"""BalanceIndexer — per-account, per-asset totals over unspent outputs."""

from __future__ import annotations

from itertools import groupby
from operator import itemgetter
from typing import TYPE_CHECKING

from walletd.engine.models import MAX_AMOUNT
from walletd.errors.definitions import ErrBalanceOverflow
from walletd.indexer._alias import resolve_alias
from walletd.indexer.models import AccountBalance, AssetAmount

if TYPE_CHECKING:
    from collections.abc import Iterable

    from walletd.engine.models import UnspentOutput
    from walletd.engine.services import AliasResolver


class BalanceIndexer:
    """Aggregate unspent outputs into sorted account balances.

    Output has one :class:`AccountBalance` per distinct account id, ordered
    by raw account id; inside each, one :class:`AssetAmount` per distinct
    asset, ordered by hex asset id. Amounts are summed exactly; a total
    above the unsigned 64-bit range raises ``ErrBalanceOverflow``.

    Usage::

        indexer = BalanceIndexer(accounts=accounts, assets=assets)
        balances = indexer.index(await wallet.get_account_utxos(""))
    """

    def __init__(self, *, accounts: AliasResolver, assets: AliasResolver) -> None:
        self._accounts = accounts
        self._assets = assets

    def totals(self, utxos: Iterable[UnspentOutput]) -> dict[tuple[str, str], int]:
        """Sum amounts keyed by ``(account_id, asset_id_hex)``."""
        totals: dict[tuple[str, str], int] = {}
        for utxo in utxos:
            key = (utxo.account_id, utxo.asset_id.hex())
            total = totals.get(key, 0) + utxo.amount
            if total > MAX_AMOUNT:
                raise ErrBalanceOverflow
            totals[key] = total
        return totals

    def index(self, utxos: Iterable[UnspentOutput]) -> list[AccountBalance]:
        """Build the sorted balance list for *utxos*."""
        totals = self.totals(utxos)

        # Tuple order sorts by account first, then asset within the account.
        ordered = sorted(totals.items(), key=itemgetter(0))

        balances: list[AccountBalance] = []
        for account_id, entries in groupby(ordered, key=lambda item: item[0][0]):
            assets = [
                AssetAmount(
                    asset_alias=resolve_alias(self._assets, asset_id),
                    asset_id=asset_id,
                    amount=amount,
                )
                for (_, asset_id), amount in entries
            ]
            balances.append(
                AccountBalance(
                    id=account_id,
                    alias=resolve_alias(self._accounts, account_id),
                    balances=assets,
                )
            )
        return balances
