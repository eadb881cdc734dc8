"""Tests for Endpoint construction and request binding."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from walletd.api.endpoint import EmptyRequest, Endpoint, EndpointGroup, RequestContext
from walletd.api.schemas import IDFilter
from walletd.engine.services import NodeServices
from walletd.errors.walletd_errors import RegistryError, WalletdError


async def _ok(ctx, req):
    return {"ok": True}


class TestRegistrationChecks:
    def test_valid_endpoint(self) -> None:
        ep = Endpoint("ping", _ok)
        assert ep.request_model is EmptyRequest
        assert ep.group is EndpointGroup.CORE

    def test_sync_handler_rejected(self) -> None:
        def sync_handler(ctx, req):
            return None

        with pytest.raises(RegistryError, match="async"):
            Endpoint("ping", sync_handler)

    def test_wrong_arity_rejected(self) -> None:
        async def one_arg(ctx):
            return None

        async def three_args(ctx, req, extra):
            return None

        with pytest.raises(RegistryError, match="exactly"):
            Endpoint("ping", one_arg)
        with pytest.raises(RegistryError, match="exactly"):
            Endpoint("ping", three_args)

    def test_required_keyword_rejected(self) -> None:
        async def kw(ctx, req, *, extra):
            return None

        with pytest.raises(RegistryError):
            Endpoint("ping", kw)

    def test_request_model_must_be_pydantic(self) -> None:
        with pytest.raises(RegistryError, match="pydantic"):
            Endpoint("ping", _ok, dict)  # type: ignore[arg-type]

    def test_bad_name_rejected(self) -> None:
        with pytest.raises(RegistryError):
            Endpoint("/ping", _ok)
        with pytest.raises(RegistryError):
            Endpoint("", _ok)

    def test_registry_error_is_walletd_error(self) -> None:
        with pytest.raises(WalletdError):
            Endpoint("ping", lambda ctx, req: None)


class TestParse:
    def test_defaults_applied(self) -> None:
        req = Endpoint("list", _ok, IDFilter).parse({})
        assert isinstance(req, BaseModel)
        assert req.id == ""

    def test_schema_mismatch_is_400(self) -> None:
        with pytest.raises(WalletdError) as exc_info:
            Endpoint("list", _ok, IDFilter).parse({"id": ["not", "a", "string"]})
        assert exc_info.value.status_code == 400
        assert "id" in exc_info.value.message


class TestCall:
    async def test_handler_awaited(self, services) -> None:
        ep = Endpoint("ping", _ok)
        ctx = RequestContext(endpoint="ping", services=services)
        assert await ep(ctx, ep.parse({})) == {"ok": True}

    async def test_context_require(self, services) -> None:
        from walletd.api.handlers.chain import block_height

        ctx = RequestContext(endpoint="block-height", services=services)
        assert await block_height(ctx, EmptyRequest()) == {"block_height": 42}

    async def test_context_require_missing(self) -> None:
        from walletd.api.handlers.chain import block_height

        ctx = RequestContext(endpoint="block-height", services=NodeServices())
        with pytest.raises(WalletdError) as exc_info:
            await block_height(ctx, EmptyRequest())
        assert exc_info.value.status_code == 503
