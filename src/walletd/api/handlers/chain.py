"""Block, network and mining status endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from walletd import __version__
from walletd.api.endpoint import EmptyRequest, Endpoint
from walletd.api.schemas import BlockHashRequest, BlockHeightRequest

if TYPE_CHECKING:
    from walletd.api.endpoint import RequestContext

# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


async def block_hash(ctx: RequestContext, req: EmptyRequest) -> dict[str, str]:
    return {"block_hash": await ctx.require("chain").best_block_hash()}


async def block_height(ctx: RequestContext, req: EmptyRequest) -> dict[str, int]:
    return {"block_height": await ctx.require("chain").block_height()}


async def get_block_header_by_hash(ctx: RequestContext, req: BlockHashRequest) -> Any:
    return await ctx.require("chain").get_block_header_by_hash(req.block_hash)


async def get_block_by_hash(ctx: RequestContext, req: BlockHashRequest) -> Any:
    return await ctx.require("chain").get_block_by_hash(req.block_hash)


async def get_block_by_height(ctx: RequestContext, req: BlockHeightRequest) -> Any:
    return await ctx.require("chain").get_block_by_height(req.block_height)


async def get_block_transactions_count_by_hash(
    ctx: RequestContext, req: BlockHashRequest
) -> dict[str, int]:
    count = await ctx.require("chain").get_block_transactions_count_by_hash(req.block_hash)
    return {"count": count}


async def get_block_transactions_count_by_height(
    ctx: RequestContext, req: BlockHeightRequest
) -> dict[str, int]:
    count = await ctx.require("chain").get_block_transactions_count_by_height(req.block_height)
    return {"count": count}


async def gas_rate(ctx: RequestContext, req: EmptyRequest) -> dict[str, int]:
    return {"gas_rate": await ctx.require("chain").gas_rate()}


async def info(ctx: RequestContext, req: EmptyRequest) -> dict[str, Any]:
    """Node summary: software version, wallet availability, chain tip and sync state."""
    chain = ctx.require("chain")
    network = ctx.require("network")
    return {
        "version": __version__,
        "wallet_enabled": ctx.services.wallet_enabled,
        "block_height": await chain.block_height(),
        "block_hash": await chain.best_block_hash(),
        "peer_count": await network.peer_count(),
        "syncing": await network.is_syncing(),
    }


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------


async def net_info(ctx: RequestContext, req: EmptyRequest) -> Any:
    return await ctx.require("network").net_info()


async def net_listening(ctx: RequestContext, req: EmptyRequest) -> dict[str, bool]:
    return {"listening": await ctx.require("network").is_listening()}


async def net_syncing(ctx: RequestContext, req: EmptyRequest) -> dict[str, bool]:
    return {"syncing": await ctx.require("network").is_syncing()}


async def peer_count(ctx: RequestContext, req: EmptyRequest) -> dict[str, int]:
    return {"peer_count": await ctx.require("network").peer_count()}


async def is_mining(ctx: RequestContext, req: EmptyRequest) -> dict[str, bool]:
    return {"is_mining": await ctx.require("network").is_mining()}


ENDPOINTS = [
    Endpoint("block-hash", block_hash),
    Endpoint("block-height", block_height),
    Endpoint("get-block-header-by-hash", get_block_header_by_hash, BlockHashRequest),
    Endpoint("get-block-by-hash", get_block_by_hash, BlockHashRequest),
    Endpoint("get-block-by-height", get_block_by_height, BlockHeightRequest),
    Endpoint(
        "get-block-transactions-count-by-hash",
        get_block_transactions_count_by_hash,
        BlockHashRequest,
    ),
    Endpoint(
        "get-block-transactions-count-by-height",
        get_block_transactions_count_by_height,
        BlockHeightRequest,
    ),
    Endpoint("net-info", net_info),
    Endpoint("net-listening", net_listening),
    Endpoint("net-syncing", net_syncing),
    Endpoint("peer-count", peer_count),
    Endpoint("is-mining", is_mining),
    Endpoint("gas-rate", gas_rate),
    Endpoint("info", info),
]
