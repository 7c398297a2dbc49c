"""Rolling history of search requests.

Keeps the most recent requests made through a :class:`SearchServer` (one per
minute of a day by default) and counts how many of them found nothing.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging

from search_server.domain.model import Document
from search_server.errors import InvalidArgumentError
from search_server.search.server import DocumentFilter, SearchServer


logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 1440


@dataclass(frozen=True, slots=True)
class QueryResult:
    """A recorded request and the documents it returned."""

    raw_query: str
    response: tuple[Document, ...]

    @property
    def is_empty(self) -> bool:
        return not self.response


class RequestQueue:
    """Search front end that remembers the last ``history_size`` requests."""

    def __init__(self, search_server: SearchServer, history_size: int = DEFAULT_HISTORY_SIZE) -> None:
        if history_size <= 0:
            raise InvalidArgumentError(f"history_size must be positive, got {history_size}")
        self._server = search_server
        self.history_size = history_size
        self._requests: deque[QueryResult] = deque()
        self._no_result_requests = 0

    def add_find_request(self, raw_query: str, document_filter: DocumentFilter = None) -> list[Document]:
        """Run a search and record it; errors propagate and are not recorded."""
        response = self._server.find_top_documents(raw_query, document_filter)
        self._add_request(raw_query, response)
        return response

    def get_no_result_requests(self) -> int:
        return self._no_result_requests

    def __len__(self) -> int:
        return len(self._requests)

    def _add_request(self, raw_query: str, response: list[Document]) -> None:
        result = QueryResult(raw_query=raw_query, response=tuple(response))
        self._requests.append(result)
        if result.is_empty:
            self._no_result_requests += 1

        while len(self._requests) > self.history_size:
            evicted = self._requests.popleft()
            if evicted.is_empty:
                self._no_result_requests -= 1
            logger.debug("Evicted request %r from history", evicted.raw_query)
