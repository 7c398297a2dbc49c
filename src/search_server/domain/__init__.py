"""Domain layer for the search server.

Value objects and filter predicates shared by the index, the request history
and the console front end.
"""

from search_server.domain.model import (
    DEFAULT_PREDICATE,
    Document,
    DocumentPredicate,
    DocumentStatus,
    status_predicate,
)


__all__ = [
    "DEFAULT_PREDICATE",
    "Document",
    "DocumentPredicate",
    "DocumentStatus",
    "status_predicate",
]
