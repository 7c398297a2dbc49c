"""String helpers shared by document ingestion and query parsing.

Tokenization is deliberately minimal: words are separated by the space
character only, and any other character (including tabs) belongs to a word.
"""

from __future__ import annotations

from collections.abc import Iterable

from search_server.errors import InvalidArgumentError


_SEPARATOR = " "
# ASCII control characters (codes 0-31) are never allowed inside a word
_CONTROL_CHARS = frozenset(chr(code) for code in range(32))


def split_into_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces, dropping empty pieces."""

    return [word for word in text.split(_SEPARATOR) if word]


def is_valid_word(word: str) -> bool:
    """Return True when ``word`` contains no ASCII control characters."""

    return _CONTROL_CHARS.isdisjoint(word)


def make_unique_non_empty_strings(strings: Iterable[str]) -> frozenset[str]:
    """Validate and deduplicate stop words, dropping empty entries."""

    non_empty: set[str] = set()
    for candidate in strings:
        if not is_valid_word(candidate):
            raise InvalidArgumentError(f"Stop word {candidate!r} contains invalid characters")
        if candidate:
            non_empty.add(candidate)
    return frozenset(non_empty)
