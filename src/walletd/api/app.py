"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from walletd import __version__
from walletd.api.dispatch import RPC_METHODS, dispatch
from walletd.api.envelope import fail_response
from walletd.api.middleware import BodySizeLimitMiddleware, LatencyMiddleware
from walletd.api.registry import RegistryBuilder
from walletd.config.settings import AppConfig
from walletd.engine.services import NodeServices
from walletd.errors.definitions import ErrNotFound
from walletd.errors.walletd_errors import CollaboratorError, WalletdError
from walletd.metrics.collector import APIMetrics

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from walletd.api.registry import EndpointRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log what the node serves; the collaborators' lifecycle is the embedder's."""
    registry: EndpointRegistry = app.state.registry
    logger.info(
        "walletd API ready: %d endpoints (%s), collaborators: %s",
        len(registry),
        registry.variant.value,
        ", ".join(app.state.services.present()) or "none",
    )
    yield
    logger.info("walletd API shut down")


def create_app(
    *,
    config: AppConfig | None = None,
    services: NodeServices | None = None,
    registry: EndpointRegistry | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        config: Optional AppConfig. If *None*, a default config is created
            from environment variables.
        services: Collaborators supplied by the embedding node. If *None*,
            none are available and only core endpoints are registered.
        registry: Prebuilt endpoint table; built from *services* when omitted.
    """
    if config is None:
        config = AppConfig()
    if services is None:
        services = NodeServices()
    if registry is None:
        registry = RegistryBuilder(services).build()

    app = FastAPI(
        title="py-walletd",
        version=__version__,
        description="JSON RPC for a wallet-enabled node",
        lifespan=_lifespan,
    )

    app.state.config = config
    app.state.services = services
    app.state.registry = registry

    # -- Error handlers --
    @app.exception_handler(WalletdError)
    async def _walletd_error_handler(request: Request, exc: WalletdError) -> JSONResponse:
        return fail_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == 404:
            return fail_response(ErrNotFound)
        return fail_response(
            WalletdError(str(exc.detail), status_code=exc.status_code, code="http-error")
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s", request.url.path)
        return fail_response(CollaboratorError(str(exc) or type(exc).__name__))

    # -- Base routes --
    @app.get("/health", tags=["base"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "registry": registry.variant.value}

    if config.metrics.enabled:
        metrics = APIMetrics()
        app.state.metrics = metrics

        @app.get("/metrics", tags=["base"], include_in_schema=False)
        async def metrics_endpoint() -> Response:
            """Prometheus metrics endpoint."""
            return Response(
                content=generate_latest(metrics.registry),
                media_type="text/plain; version=0.0.4; charset=utf-8",
            )

        app.add_middleware(LatencyMiddleware, metrics=metrics, registry=registry)

    # -- RPC endpoints: one catch-all route, resolved through the registry --
    app.add_api_route(
        "/{name:path}",
        dispatch,
        methods=list(RPC_METHODS),
        include_in_schema=False,
    )

    # Added last so it wraps everything, including the latency recorder.
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=config.api.max_body_bytes)

    return app
