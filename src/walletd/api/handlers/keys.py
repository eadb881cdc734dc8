"""Key management endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from walletd.api.endpoint import EmptyRequest, Endpoint, EndpointGroup
from walletd.api.schemas import CreateKeyRequest, DeleteKeyRequest, ResetPasswordRequest

if TYPE_CHECKING:
    from walletd.api.endpoint import RequestContext


async def create_key(ctx: RequestContext, req: CreateKeyRequest) -> Any:
    return await ctx.require("keys").create_key(req.alias, req.password)


async def list_keys(ctx: RequestContext, req: EmptyRequest) -> list[Any]:
    return await ctx.require("keys").list_keys()


async def delete_key(ctx: RequestContext, req: DeleteKeyRequest) -> None:
    await ctx.require("keys").delete_key(req.xpub, req.password)


async def reset_password(ctx: RequestContext, req: ResetPasswordRequest) -> None:
    await ctx.require("keys").reset_password(req.xpub, req.old_password, req.new_password)


ENDPOINTS = [
    Endpoint("create-key", create_key, CreateKeyRequest, EndpointGroup.WALLET),
    Endpoint("list-keys", list_keys, EmptyRequest, EndpointGroup.WALLET),
    Endpoint("delete-key", delete_key, DeleteKeyRequest, EndpointGroup.WALLET),
    Endpoint("reset-password", reset_password, ResetPasswordRequest, EndpointGroup.WALLET),
]
