"""Indexers — pure transforms of wallet unspent outputs into API payloads."""

from __future__ import annotations

from walletd.indexer.balances import BalanceIndexer
from walletd.indexer.models import AccountBalance, AnnotatedUnspentOutput, AssetAmount
from walletd.indexer.unspent import UnspentOutputIndexer

__all__ = [
    "AccountBalance",
    "AnnotatedUnspentOutput",
    "AssetAmount",
    "BalanceIndexer",
    "UnspentOutputIndexer",
]
