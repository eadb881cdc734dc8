"""Wallet query endpoints — balances, unspent outputs and history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from walletd.api.endpoint import EmptyRequest, Endpoint, EndpointGroup
from walletd.api.schemas import IDFilter, TransactionFilter
from walletd.indexer import BalanceIndexer, UnspentOutputIndexer

if TYPE_CHECKING:
    from walletd.api.endpoint import RequestContext
    from walletd.indexer import AccountBalance, AnnotatedUnspentOutput


async def list_balances(ctx: RequestContext, req: EmptyRequest) -> list[AccountBalance]:
    """Balances of every account, summed per asset."""
    wallet = ctx.require("wallet")
    utxos = await wallet.get_account_utxos("")
    indexer = BalanceIndexer(accounts=ctx.require("accounts"), assets=ctx.require("assets"))
    return indexer.index(utxos)


async def list_unspent_outputs(
    ctx: RequestContext, req: IDFilter
) -> list[AnnotatedUnspentOutput]:
    """Unspent outputs, optionally for one account, in wallet order."""
    wallet = ctx.require("wallet")
    utxos = await wallet.get_account_utxos(req.id)
    return UnspentOutputIndexer(accounts=ctx.require("accounts")).index(utxos)


async def list_transactions(ctx: RequestContext, req: TransactionFilter) -> list[Any]:
    """Transactions of an account, or by transaction id (empty id = all)."""
    wallet = ctx.require("wallet")
    if req.account_id:
        return await wallet.get_transactions_by_account_id(req.account_id)
    return await wallet.get_transactions_by_tx_id(req.id)


ENDPOINTS = [
    Endpoint("list-transactions", list_transactions, TransactionFilter, EndpointGroup.WALLET),
    Endpoint("list-balances", list_balances, EmptyRequest, EndpointGroup.WALLET),
    Endpoint("list-unspent-outputs", list_unspent_outputs, IDFilter, EndpointGroup.WALLET),
]
