"""Account and asset endpoints — passthroughs to the registries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from walletd.api.endpoint import Endpoint, EndpointGroup
from walletd.api.schemas import (
    AccountInfoRequest,
    CreateAccountRequest,
    CreateAssetRequest,
    CreateReceiverRequest,
    IDFilter,
    UpdateAccountTagsRequest,
    UpdateAssetTagsRequest,
)

if TYPE_CHECKING:
    from walletd.api.endpoint import RequestContext

# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


async def create_account(ctx: RequestContext, req: CreateAccountRequest) -> Any:
    accounts = ctx.require("accounts")
    return await accounts.create_account(req.root_xpubs, req.quorum, req.alias, req.tags)


async def update_account_tags(ctx: RequestContext, req: UpdateAccountTagsRequest) -> None:
    await ctx.require("accounts").update_tags(req.account_info, req.tags)


async def create_account_receiver(ctx: RequestContext, req: CreateReceiverRequest) -> Any:
    return await ctx.require("accounts").create_receiver(req.account_info, req.expires_at)


async def list_accounts(ctx: RequestContext, req: IDFilter) -> list[Any]:
    return await ctx.require("accounts").list_accounts(req.id)


async def delete_account(ctx: RequestContext, req: AccountInfoRequest) -> None:
    await ctx.require("accounts").delete_account(req.account_info)


async def create_control_program(ctx: RequestContext, req: AccountInfoRequest) -> Any:
    """A fresh control program of the account; offered on read-only nodes too."""
    return await ctx.require("accounts").create_control_program(req.account_info)


# ---------------------------------------------------------------------------
# Assets
# ---------------------------------------------------------------------------


async def create_asset(ctx: RequestContext, req: CreateAssetRequest) -> Any:
    assets = ctx.require("assets")
    return await assets.create_asset(
        req.root_xpubs, req.quorum, req.alias, req.tags, req.definition
    )


async def update_asset_tags(ctx: RequestContext, req: UpdateAssetTagsRequest) -> None:
    await ctx.require("assets").update_tags(req.asset_info, req.tags)


async def list_assets(ctx: RequestContext, req: IDFilter) -> list[Any]:
    return await ctx.require("assets").list_assets(req.id)


_WALLET = EndpointGroup.WALLET

ENDPOINTS = [
    Endpoint("create-account", create_account, CreateAccountRequest, _WALLET),
    Endpoint("update-account-tags", update_account_tags, UpdateAccountTagsRequest, _WALLET),
    Endpoint("create-account-receiver", create_account_receiver, CreateReceiverRequest, _WALLET),
    Endpoint("list-accounts", list_accounts, IDFilter, _WALLET),
    Endpoint("delete-account", delete_account, AccountInfoRequest, _WALLET),
    Endpoint("create-control-program", create_control_program, AccountInfoRequest),
    Endpoint("create-asset", create_asset, CreateAssetRequest, _WALLET),
    Endpoint("update-asset-tags", update_asset_tags, UpdateAssetTagsRequest, _WALLET),
    Endpoint("list-assets", list_assets, IDFilter, _WALLET),
]
