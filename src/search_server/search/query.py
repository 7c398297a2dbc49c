"""Query parsing into plus and minus word sets."""

from __future__ import annotations

from collections.abc import Set
from dataclasses import dataclass

from search_server.errors import InvalidArgumentError
from search_server.search.text import is_valid_word, split_into_words


_MINUS_PREFIX = "-"


@dataclass(frozen=True, slots=True)
class QueryWord:
    """A single validated query token."""

    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True, slots=True)
class Query:
    """Immutable snapshot of a parsed query.

    Both sets collapse duplicates, so repeating a word never changes its
    weight.
    """

    plus_words: frozenset[str] = frozenset()
    minus_words: frozenset[str] = frozenset()

    def is_empty(self) -> bool:
        return not self.plus_words and not self.minus_words


def parse_query_word(text: str, stop_words: Set[str]) -> QueryWord:
    """Parse one raw token, stripping a single leading minus."""

    is_minus = text.startswith(_MINUS_PREFIX)
    word = text[1:] if is_minus else text
    if not word or word.startswith(_MINUS_PREFIX) or not is_valid_word(word):
        raise InvalidArgumentError(f"Invalid query word {text!r}")
    return QueryWord(data=word, is_minus=is_minus, is_stop=word in stop_words)


def parse_query(text: str, stop_words: Set[str]) -> Query:
    """Split ``text`` into plus and minus words.

    Every word is validated before stop words are discarded, so a malformed
    stop word still fails the whole query.
    """

    plus_words: set[str] = set()
    minus_words: set[str] = set()
    for raw_word in split_into_words(text):
        query_word = parse_query_word(raw_word, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            minus_words.add(query_word.data)
        else:
            plus_words.add(query_word.data)
    return Query(plus_words=frozenset(plus_words), minus_words=frozenset(minus_words))
