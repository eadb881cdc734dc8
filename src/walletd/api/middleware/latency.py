"""Per-route latency and request-count middleware.

Requests are labelled by the endpoint name they match in the registry;
unmatched paths and plain HTTP routes (``/health``, ``/metrics``) are not
recorded.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

    from starlette.requests import Request
    from starlette.responses import Response

    from walletd.api.registry import EndpointRegistry
    from walletd.metrics.collector import APIMetrics


class LatencyMiddleware(BaseHTTPMiddleware):
    """Record wall-clock duration of every request to a registered endpoint."""

    def __init__(self, app: object, *, metrics: APIMetrics, registry: EndpointRegistry) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._metrics = metrics
        self._registry = registry

    async def dispatch(self, request: Request, call_next: Callable) -> Response:  # type: ignore[type-arg]
        """Time the inner app when the path names an endpoint."""
        endpoint = self._registry.match(request.url.path)
        if endpoint is None:
            return await call_next(request)

        start = time.monotonic()
        response: Response = await call_next(request)
        self._metrics.observe(endpoint.name, response.status_code, time.monotonic() - start)
        return response
