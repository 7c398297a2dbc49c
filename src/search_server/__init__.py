"""In-process TF-IDF full-text search server."""

from search_server.domain.model import (
    DEFAULT_PREDICATE,
    Document,
    DocumentPredicate,
    DocumentStatus,
    status_predicate,
)
from search_server.errors import DocumentNotFoundError, InvalidArgumentError, SearchServerError
from search_server.search.paginator import Page, Paginator, paginate
from search_server.search.request_queue import RequestQueue
from search_server.search.server import SearchServer
from search_server.search.text import is_valid_word, split_into_words


__all__ = [
    "DEFAULT_PREDICATE",
    "Document",
    "DocumentNotFoundError",
    "DocumentPredicate",
    "DocumentStatus",
    "InvalidArgumentError",
    "Page",
    "Paginator",
    "RequestQueue",
    "SearchServer",
    "SearchServerError",
    "is_valid_word",
    "paginate",
    "split_into_words",
    "status_predicate",
]
