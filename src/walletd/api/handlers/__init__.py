"""RPC handlers grouped by availability.

``WALLET_ENDPOINTS`` are only registered on nodes that run both the
accounts and the assets service; ``CORE_ENDPOINTS`` always are.
"""

from __future__ import annotations

from walletd.api.endpoint import EndpointGroup
from walletd.api.handlers import accounts, chain, keys, query, transactions

_ALL = [
    *accounts.ENDPOINTS,
    *keys.ENDPOINTS,
    *query.ENDPOINTS,
    *transactions.ENDPOINTS,
    *chain.ENDPOINTS,
]

WALLET_ENDPOINTS = tuple(e for e in _ALL if e.group is EndpointGroup.WALLET)
CORE_ENDPOINTS = tuple(e for e in _ALL if e.group is EndpointGroup.CORE)

__all__ = ["CORE_ENDPOINTS", "WALLET_ENDPOINTS"]
