"""Middleware — body-size limit and per-route latency, in that order."""

from __future__ import annotations

from walletd.api.middleware.body_limit import BodySizeLimitMiddleware
from walletd.api.middleware.latency import LatencyMiddleware

__all__ = ["BodySizeLimitMiddleware", "LatencyMiddleware"]
