"""Domain model - value objects and document filters.

- Value Objects are immutable (frozen=True)
- No infrastructure dependencies
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias


class DocumentStatus(IntEnum):
    """Lifecycle status assigned to a document when it is added."""

    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


@dataclass(frozen=True, slots=True)
class Document:
    """A ranked search hit."""

    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


DocumentPredicate: TypeAlias = Callable[[int, DocumentStatus, int], bool]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Return a predicate that accepts documents with exactly ``status``."""

    def _matches(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return _matches


DEFAULT_PREDICATE: DocumentPredicate = status_predicate(DocumentStatus.ACTUAL)
