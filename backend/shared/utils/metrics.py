"""
Lightweight metrics collection for the content services.
Wraps prometheus_client with async-safe patterns.
"""
from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from prometheus_client import Counter, Histogram, start_http_server

from shared.config import get_settings
from shared.utils.logging import get_logger

logger = get_logger(__name__)

# ── Counters ────────────────────────────────────────────────────────────
ASSEMBLY_FAILURES = Counter(
    "lb_assembly_failures_total",
    "Content assembly failures by aggregate and failure kind",
    ["part", "kind"],
)
ASSEMBLED_ROWS = Counter(
    "lb_assembled_rows_total",
    "Rows decoded into domain entities",
    ["part"],
)

# ── Histograms ──────────────────────────────────────────────────────────
ASSEMBLY_LATENCY = Histogram(
    "lb_assembly_latency_seconds",
    "Time to run and decode one assembler query",
    ["part"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)


@asynccontextmanager
async def atrack_latency(histogram: Histogram, **labels: str) -> AsyncIterator[None]:
    """Async context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        histogram.labels(**labels).observe(elapsed)


def start_metrics_server(port: int | None = None) -> None:
    """Start the Prometheus metrics HTTP server."""
    settings = get_settings()
    if not settings.metrics_enabled:
        return
    metrics_port = port or settings.metrics_port
    try:
        start_http_server(metrics_port)
        logger.info("metrics_server_started", port=metrics_port)
    except OSError as exc:
        logger.warning("metrics_server_failed", error=str(exc), port=metrics_port)
