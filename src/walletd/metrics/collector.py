"""Metrics collector — Prometheus counters and histograms for the RPC layer.

- ``walletd_request_total`` counter-vec (route, status_code)
- ``walletd_request_duration_seconds`` histogram-vec (route)
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram

_PREFIX = "walletd"


class MetricsCollector:
    """Low-level Prometheus collector that owns the registry.

    Use :class:`APIMetrics` for the high-level tracking interface.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._registry

    def histogram(self, name: str, doc: str, labels: tuple[str, ...] = ()) -> Histogram:
        """Register and return a Histogram."""
        return Histogram(name, doc, labels, registry=self._registry)

    def counter(self, name: str, doc: str, labels: tuple[str, ...] = ()) -> Counter:
        """Register and return a Counter."""
        return Counter(name, doc, labels, registry=self._registry)


class APIMetrics:
    """Per-route request metrics for the dispatch layer.

    Routes are labelled by endpoint name (``list-balances``), never by raw
    path, so unmatched requests do not create new label values.
    """

    def __init__(self, collector: MetricsCollector | None = None) -> None:
        self._collector = collector or MetricsCollector()
        self._requests = self._collector.counter(
            f"{_PREFIX}_request_total",
            "Total RPC requests by route and HTTP status",
            ("route", "status_code"),
        )
        self._latency = self._collector.histogram(
            f"{_PREFIX}_request_duration_seconds",
            "RPC request duration in seconds",
            ("route",),
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._collector.registry

    def observe(self, route: str, status_code: int, duration: float) -> None:
        """Record one finished request."""
        self._requests.labels(route=route, status_code=str(status_code)).inc()
        self._latency.labels(route=route).observe(duration)
