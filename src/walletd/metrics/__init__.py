"""Metrics — Prometheus metrics collection and exposure."""

from __future__ import annotations

from walletd.metrics.collector import APIMetrics, MetricsCollector

__all__ = ["APIMetrics", "MetricsCollector"]
