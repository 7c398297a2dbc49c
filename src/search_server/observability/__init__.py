"""Observability module for structured logging, metrics and tracing."""

from search_server.observability.context import get_trace_context, set_trace_context, trace_context
from search_server.observability.logging import JsonFormatter, configure_logging
from search_server.observability.metrics import (
    DOCUMENTS_ADDED,
    EMPTY_RESULTS,
    INDEX_DOCUMENT_COUNT,
    QUERY_ERRORS,
    SEARCH_LATENCY,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from search_server.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "DOCUMENTS_ADDED",
    "EMPTY_RESULTS",
    "INDEX_DOCUMENT_COUNT",
    "QUERY_ERRORS",
    "SEARCH_LATENCY",
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
