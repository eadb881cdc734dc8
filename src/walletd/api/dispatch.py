"""Request dispatch — route a POST to its endpoint and envelope the result."""

from __future__ import annotations

import json
import logging
from typing import Any

from starlette.requests import Request
from starlette.responses import Response

from walletd.api.endpoint import RequestContext
from walletd.api.envelope import ResponseEnvelope, fail_response
from walletd.errors.definitions import ErrInvalidJSON, ErrNotFound
from walletd.errors.walletd_errors import CollaboratorError, WalletdError

logger = logging.getLogger(__name__)

# Every method reaches dispatch; unknown ones get an envelope like any other path.
RPC_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")


async def _read_payload(request: Request) -> dict[str, Any]:
    """Decode the body as a JSON object; an empty body is ``{}``."""
    body = await request.body()
    if not body.strip():
        return {}
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ErrInvalidJSON from exc
    if not isinstance(payload, dict):
        raise ErrInvalidJSON
    return payload


async def dispatch(request: Request, name: str) -> Response:
    """Serve ``/<name>`` from the endpoint registry.

    Every outcome is an envelope: unknown names get NotFound, bad bodies a
    400, handler errors their own status, anything unexpected a 500
    carrying the upstream message.
    """
    registry = request.app.state.registry
    endpoint = registry.match(name)
    if endpoint is None:
        return fail_response(ErrNotFound)

    try:
        req = endpoint.parse(await _read_payload(request))
        ctx = RequestContext(
            endpoint=endpoint.name,
            services=request.app.state.services,
            request=request,
        )
        envelope = ResponseEnvelope.success(await endpoint(ctx, req))
        # JSON rendering rejects NaN and infinity.
        return envelope.to_response()
    except WalletdError as exc:
        logger.error("%s: %s", endpoint.name, exc.message)
        return fail_response(exc)
    except Exception as exc:
        logger.exception("%s failed", endpoint.name)
        return fail_response(CollaboratorError(str(exc) or type(exc).__name__))
