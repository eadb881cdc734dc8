"""Endpoint — one named RPC operation bound to its handler.

Every handler has the same shape::

    async def handler(ctx: RequestContext, req: SomeRequest) -> payload

The request body is validated against the endpoint's pydantic model before
the handler runs. A handler that does not fit this shape is rejected when
the :class:`Endpoint` is created, so a bad table fails at startup.
"""

from __future__ import annotations

import enum
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from walletd.errors.definitions import invalid_request
from walletd.errors.walletd_errors import RegistryError

if TYPE_CHECKING:
    from starlette.requests import Request

    from walletd.engine.services import NodeServices


class EndpointGroup(enum.StrEnum):
    """Availability group of an endpoint."""

    CORE = "core"
    WALLET = "wallet"  # needs accounts and assets


class EmptyRequest(BaseModel):
    """Request body of endpoints that take no arguments."""


@dataclass(frozen=True)
class RequestContext:
    """Per-request context handed to every handler."""

    endpoint: str
    services: NodeServices
    request: Request | None = None

    def require(self, service: str) -> Any:
        """Shortcut for ``ctx.services.require(service)``."""
        return self.services.require(service)


Handler = Callable[[RequestContext, Any], Awaitable[Any]]


def _check_handler(name: str, handler: Handler, request_model: type) -> None:
    if not name or name != name.strip("/"):
        msg = f"invalid endpoint name {name!r}"
        raise RegistryError(msg)
    if not (isinstance(request_model, type) and issubclass(request_model, BaseModel)):
        msg = f"{name}: request model must be a pydantic model, got {request_model!r}"
        raise RegistryError(msg)
    if not inspect.iscoroutinefunction(handler):
        msg = f"{name}: handler {handler!r} must be an async function"
        raise RegistryError(msg)
    params = list(inspect.signature(handler).parameters.values())
    positional = [
        p
        for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    required_other = [
        p
        for p in params
        if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty
    ]
    if len(positional) != 2 or required_other:
        msg = f"{name}: handler must take exactly (ctx, request)"
        raise RegistryError(msg)


@dataclass(frozen=True)
class Endpoint:
    """A named operation, its handler, request model and availability group."""

    name: str
    handler: Handler = field(repr=False)
    request_model: type[BaseModel] = EmptyRequest
    group: EndpointGroup = EndpointGroup.CORE

    def __post_init__(self) -> None:
        _check_handler(self.name, self.handler, self.request_model)

    def parse(self, payload: dict[str, Any]) -> BaseModel:
        """Validate a decoded JSON body against the request model."""
        try:
            return self.request_model.model_validate(payload)
        except ValidationError as exc:
            detail = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
                for err in exc.errors()
            )
            raise invalid_request(detail) from exc

    async def __call__(self, ctx: RequestContext, req: BaseModel) -> Any:
        return await self.handler(ctx, req)
