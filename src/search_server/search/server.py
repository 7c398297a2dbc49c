"""In-memory TF-IDF search server.

Maintains a forward index (term -> document -> term frequency) and a reverse
index (document -> term -> term frequency) over append-only documents, and
ranks documents against free-text queries with plus and minus words.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
import logging
import threading
import time
from types import MappingProxyType

from search_server.domain.model import (
    DEFAULT_PREDICATE,
    Document,
    DocumentPredicate,
    DocumentStatus,
    status_predicate,
)
from search_server.errors import DocumentNotFoundError, InvalidArgumentError
from search_server.observability.metrics import (
    DOCUMENTS_ADDED,
    EMPTY_RESULTS,
    INDEX_DOCUMENT_COUNT,
    QUERY_ERRORS,
    SEARCH_LATENCY,
    track_latency,
)
from search_server.observability.tracing import create_span
from search_server.search.query import Query, parse_query
from search_server.search.stats import calculate_idf, compute_average_rating, compute_term_frequencies
from search_server.search.text import is_valid_word, make_unique_non_empty_strings, split_into_words


logger = logging.getLogger(__name__)

DocumentFilter = DocumentStatus | DocumentPredicate | None

_EMPTY_FREQUENCIES: Mapping[str, float] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class _DocumentData:
    rating: int
    status: DocumentStatus


class SearchServer:
    """Full-text search over short documents ranked by TF-IDF.

    Stop words are fixed at construction time and are ignored both when
    indexing documents and when parsing queries.
    """

    INVALID_DOCUMENT_ID = -1
    MAX_RESULT_DOCUMENT_COUNT = 5
    RELEVANCE_EPSILON = 1e-6

    def __init__(self, stop_words: str | Iterable[str] = "") -> None:
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        self._stop_words = make_unique_non_empty_strings(stop_words)
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._document_to_word_freqs: dict[int, dict[str, float]] = {}
        self._documents: dict[int, _DocumentData] = {}
        self._document_ids: list[int] = []
        # Writers mutate both indices; readers must never see one without the other
        self._lock = threading.RLock()

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        """Index a new document.

        Raises:
            InvalidArgumentError: negative or duplicate id, or text containing
                control characters. The index is left unchanged.
        """
        try:
            status = DocumentStatus(status)
        except ValueError as exc:
            QUERY_ERRORS.labels(operation="add").inc()
            raise InvalidArgumentError(f"Unknown document status {status!r}") from exc

        with self._lock:
            if document_id < 0:
                QUERY_ERRORS.labels(operation="add").inc()
                raise InvalidArgumentError(f"Document id must be non-negative, got {document_id}")
            if document_id in self._documents:
                QUERY_ERRORS.labels(operation="add").inc()
                raise InvalidArgumentError(f"Document id {document_id} is already in use")

            words = self._split_into_words_no_stop(document)
            term_frequencies = compute_term_frequencies(words)
            rating = compute_average_rating(ratings)

            for word, term_freq in term_frequencies.items():
                self._word_to_document_freqs.setdefault(word, {})[document_id] = term_freq
            self._document_to_word_freqs[document_id] = term_frequencies
            self._documents[document_id] = _DocumentData(rating=rating, status=status)
            self._document_ids.append(document_id)

        DOCUMENTS_ADDED.labels(status=status.name.lower()).inc()
        INDEX_DOCUMENT_COUNT.inc()
        if not term_frequencies:
            logger.debug("Document %d has no indexable words", document_id)

    def find_top_documents(self, raw_query: str, document_filter: DocumentFilter = None) -> list[Document]:
        """Return at most ``MAX_RESULT_DOCUMENT_COUNT`` best matches for ``raw_query``.

        Args:
            raw_query: Space separated words; a leading ``-`` marks a minus word.
            document_filter: ``None`` keeps ACTUAL documents, a ``DocumentStatus``
                keeps documents with that status, and a callable
                ``(document_id, status, rating) -> bool`` decides per document.

        Returns:
            Documents ordered by descending relevance, ties (within
            ``RELEVANCE_EPSILON``) broken by descending rating.
        """
        predicate = self._resolve_predicate(document_filter)
        start = time.perf_counter()
        with (
            create_span("search_server.find_top_documents", attributes={"query": raw_query}) as span,
            track_latency(SEARCH_LATENCY, operation="find"),
        ):
            query = self._parse_query(raw_query, operation="find")
            with self._lock:
                matched_documents = self._find_all_documents(query, predicate)

            matched_documents.sort(key=cmp_to_key(self._compare_documents))
            del matched_documents[self.MAX_RESULT_DOCUMENT_COUNT :]
            span.set_attribute("result_count", len(matched_documents))

        if not matched_documents:
            EMPTY_RESULTS.inc()
        logger.debug(
            "Search for %r returned %d documents in %.3f ms",
            raw_query,
            len(matched_documents),
            (time.perf_counter() - start) * 1000,
        )
        return matched_documents

    def get_document_count(self) -> int:
        return len(self._documents)

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """Return the query's plus words present in a document, and its status.

        The word list is empty when any minus word occurs in the document.

        Raises:
            InvalidArgumentError: malformed query.
            DocumentNotFoundError: ``document_id`` was never added.
        """
        start = time.perf_counter()
        with (
            create_span(
                "search_server.match_document",
                attributes={"query": raw_query, "document_id": document_id},
            ),
            track_latency(SEARCH_LATENCY, operation="match"),
        ):
            query = self._parse_query(raw_query, operation="match")
            with self._lock:
                document_data = self._documents.get(document_id)
                if document_data is None:
                    QUERY_ERRORS.labels(operation="match").inc()
                    raise DocumentNotFoundError(document_id)

                document_words = self._document_to_word_freqs[document_id]
                matched_words = sorted(word for word in query.plus_words if word in document_words)
                if any(word in document_words for word in query.minus_words):
                    matched_words = []

        logger.debug(
            "Match of %r against document %d found %d words in %.3f ms",
            raw_query,
            document_id,
            len(matched_words),
            (time.perf_counter() - start) * 1000,
        )
        return matched_words, document_data.status

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Return a read-only view of a document's term frequencies.

        Unknown ids yield an empty mapping rather than an error.
        """
        frequencies = self._document_to_word_freqs.get(document_id)
        if frequencies is None:
            return _EMPTY_FREQUENCIES
        return MappingProxyType(frequencies)

    def __len__(self) -> int:
        return self.get_document_count()

    def __iter__(self) -> Iterator[int]:
        with self._lock:
            return iter(list(self._document_ids))

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def _is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        words = []
        for word in split_into_words(text):
            if not is_valid_word(word):
                QUERY_ERRORS.labels(operation="add").inc()
                raise InvalidArgumentError(f"Invalid word {word!r}")
            if not self._is_stop_word(word):
                words.append(word)
        return words

    def _parse_query(self, raw_query: str, *, operation: str) -> Query:
        try:
            return parse_query(raw_query, self._stop_words)
        except InvalidArgumentError:
            QUERY_ERRORS.labels(operation=operation).inc()
            raise

    @staticmethod
    def _resolve_predicate(document_filter: DocumentFilter) -> DocumentPredicate:
        if document_filter is None:
            return DEFAULT_PREDICATE
        if isinstance(document_filter, DocumentStatus):
            return status_predicate(document_filter)
        if callable(document_filter):
            return document_filter
        raise TypeError(f"Expected DocumentStatus or predicate, got {type(document_filter).__name__}")

    def _compute_word_inverse_document_freq(self, word: str) -> float:
        return calculate_idf(len(self._word_to_document_freqs[word]), self.get_document_count())

    def _find_all_documents(self, query: Query, predicate: DocumentPredicate) -> list[Document]:
        document_to_relevance: dict[int, float] = {}
        for word in sorted(query.plus_words):
            postings = self._word_to_document_freqs.get(word)
            if postings is None:
                continue
            inverse_document_freq = self._compute_word_inverse_document_freq(word)
            for document_id, term_freq in postings.items():
                document_data = self._documents[document_id]
                if predicate(document_id, document_data.status, document_data.rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0) + term_freq * inverse_document_freq
                    )

        for word in query.minus_words:
            for document_id in self._word_to_document_freqs.get(word, {}):
                document_to_relevance.pop(document_id, None)

        return [
            Document(id=document_id, relevance=relevance, rating=self._documents[document_id].rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    @classmethod
    def _compare_documents(cls, lhs: Document, rhs: Document) -> int:
        if abs(lhs.relevance - rhs.relevance) < cls.RELEVANCE_EPSILON:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1
