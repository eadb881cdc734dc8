"""Client — template builder, RPC client and the ``walletd-cli`` command."""

from __future__ import annotations

from walletd.client.rpc import NodeClient
from walletd.client.template import BuildKind, TransactionTemplateBuilder

__all__ = ["BuildKind", "NodeClient", "TransactionTemplateBuilder"]
