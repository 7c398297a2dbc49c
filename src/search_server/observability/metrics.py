"""Prometheus metrics for index and query operations."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


SEARCH_LATENCY = Histogram(
    "search_server_query_latency_seconds",
    "Query latency in seconds",
    ["operation"],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25),
)

DOCUMENTS_ADDED = Counter(
    "search_server_documents_added_total",
    "Documents added to the index",
    ["status"],
)

INDEX_DOCUMENT_COUNT = Gauge(
    "search_server_index_document_count",
    "Documents in index",
)

EMPTY_RESULTS = Counter(
    "search_server_empty_results_total",
    "Searches that returned no documents",
)

QUERY_ERRORS = Counter(
    "search_server_errors_total",
    "Rejected documents and queries",
    ["operation"],
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get content type for metrics exposition."""
    return CONTENT_TYPE_LATEST
