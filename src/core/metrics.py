"""Prometheus metrics for the payOS Gateway service.

Business Metrics:
- payos_payment_links_created_total: Payment links by source
- payos_webhooks_received_total: Webhooks by verification outcome

Technical Metrics:
- payos_gateway_latency_seconds: SDK call latency by role/operation
- payos_gateway_failures_total: SDK call failures by role/operation
- payos_gateway_clients_initialized_total: Client handles built at startup
- payos_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

payment_links_created = Counter(
    "payos_payment_links_created_total",
    "Total number of payment links created",
    ["source"],  # package, game
)

webhooks_received = Counter(
    "payos_webhooks_received_total",
    "Total number of payOS webhooks received",
    ["outcome"],  # verified, rejected
)


# =============================================================================
# Technical Metrics
# =============================================================================

gateway_latency = Histogram(
    "payos_gateway_latency_seconds",
    "payOS SDK call latency in seconds",
    ["role", "operation"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

gateway_failures = Counter(
    "payos_gateway_failures_total",
    "Total number of failed payOS SDK calls",
    ["role", "operation"],
)

gateway_clients_initialized = Counter(
    "payos_gateway_clients_initialized_total",
    "Total number of payOS client handles constructed",
    ["role"],
)

http_requests_total = Counter(
    "payos_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "payos_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_gateway_latency(role: str, operation: str) -> Generator[None, None, None]:
    """Context manager to track payOS SDK call latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        gateway_latency.labels(role=role, operation=operation).observe(duration)


def record_gateway_failure(role: str, operation: str) -> None:
    """Record a failed payOS SDK call."""
    gateway_failures.labels(role=role, operation=operation).inc()


def record_client_initialized(role: str) -> None:
    """Record construction of a client handle."""
    gateway_clients_initialized.labels(role=role).inc()


def record_payment_link_created(source: str) -> None:
    """Record a created payment link."""
    payment_links_created.labels(source=source).inc()


def record_webhook(verified: bool) -> None:
    """Record an incoming webhook and whether it verified."""
    webhooks_received.labels(outcome="verified" if verified else "rejected").inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
