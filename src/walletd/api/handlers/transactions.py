"""Transaction endpoints — build, sign and submit templates.

Building and submitting are core operations; signing needs the key store
and is only offered by wallet-enabled nodes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from walletd.api.endpoint import Endpoint, EndpointGroup
from walletd.api.schemas import BuildRequest, SignRequest, SubmitRequest

if TYPE_CHECKING:
    from walletd.api.endpoint import RequestContext


async def build_transaction(ctx: RequestContext, req: BuildRequest) -> dict[str, Any]:
    return await ctx.require("transactions").build(req.wire_actions())


async def sign_transaction(ctx: RequestContext, req: SignRequest) -> dict[str, Any]:
    return await ctx.require("keys").sign_template(req.transaction, req.auth)


async def submit_transaction(ctx: RequestContext, req: SubmitRequest) -> Any:
    return await ctx.require("transactions").submit(req.transaction)


async def sign_submit_transaction(ctx: RequestContext, req: SignRequest) -> Any:
    keys = ctx.require("keys")
    transactions = ctx.require("transactions")
    signed = await keys.sign_template(req.transaction, req.auth)
    return await transactions.submit(signed)


ENDPOINTS = [
    Endpoint("build-transaction", build_transaction, BuildRequest),
    Endpoint("submit-transaction", submit_transaction, SubmitRequest),
    Endpoint("sign-transaction", sign_transaction, SignRequest, EndpointGroup.WALLET),
    Endpoint(
        "sign-submit-transaction", sign_submit_transaction, SignRequest, EndpointGroup.WALLET
    ),
]
