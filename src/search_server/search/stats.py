"""Statistical helpers for TF-IDF scoring.

The functions here stay independent of the index structures so they can be
unit tested in isolation.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
import math


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Return the mean rating truncated toward zero, or 0 for no ratings."""

    if not ratings:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient


def compute_term_frequencies(words: Sequence[str]) -> dict[str, float]:
    """Return ``occurrences / len(words)`` for each distinct word.

    An empty word list yields an empty mapping instead of dividing by zero.
    """

    if not words:
        return {}
    inv_word_count = 1.0 / len(words)
    return {word: count * inv_word_count for word, count in Counter(words).items()}


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return the natural-log inverse document frequency."""

    if doc_freq <= 0 or total_docs <= 0:
        return 0.0
    return math.log(total_docs / doc_freq)
