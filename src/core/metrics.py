"""Prometheus metrics for the Card Gateway service.

Business Metrics:
- cardgw_card_deletions_total: Card deletion attempts by outcome
- cardgw_cards_added_total: Cards added and attached to customers

Technical Metrics:
- cardgw_gateway_requests_total: Stripe requests by operation and status
- cardgw_gateway_latency_seconds: Stripe request latency by operation
- cardgw_gateway_failures_total: Stripe failures by error type
- cardgw_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

card_deletions_total = Counter(
    "cardgw_card_deletions_total",
    "Total number of card deletion attempts",
    ["outcome"],  # detached_expired, detached_active, empty_card_set, last_active_card, invalid_card
)

cards_added_total = Counter(
    "cardgw_cards_added_total",
    "Total number of cards created and attached to a customer",
)


# =============================================================================
# Technical Metrics
# =============================================================================

gateway_requests_total = Counter(
    "cardgw_gateway_requests_total",
    "Total number of Stripe API requests",
    ["operation", "status"],  # status: success, failure
)

gateway_latency = Histogram(
    "cardgw_gateway_latency_seconds",
    "Stripe API request latency in seconds",
    ["operation"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

gateway_failures = Counter(
    "cardgw_gateway_failures_total",
    "Total number of Stripe API failures",
    ["operation", "error_type"],  # timeout, not_found, card_error, error
)

http_requests_total = Counter(
    "cardgw_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "cardgw_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_card_deletion(outcome: str) -> None:
    """Record the outcome of a card deletion attempt."""
    card_deletions_total.labels(outcome=outcome).inc()


def record_card_added() -> None:
    """Record a card that was created and attached."""
    cards_added_total.inc()


@contextmanager
def track_gateway_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track Stripe API latency for one operation."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        gateway_latency.labels(operation=operation).observe(duration)


def record_gateway_success(operation: str) -> None:
    """Record a successful Stripe API call."""
    gateway_requests_total.labels(operation=operation, status="success").inc()


def record_gateway_failure(operation: str, error_type: str) -> None:
    """Record a failed Stripe API call."""
    gateway_requests_total.labels(operation=operation, status="failure").inc()
    gateway_failures.labels(operation=operation, error_type=error_type).inc()


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
