"""Tests for TF-IDF statistics helpers."""

import math

import pytest

from search_server.search.stats import calculate_idf, compute_average_rating, compute_term_frequencies


class TestComputeAverageRating:
    @pytest.mark.parametrize(
        ("ratings", "expected"),
        [
            ([], 0),
            ([1, 2, 3], 2),
            ([100, 10, 100], 70),
            ([8, -3], 2),
            ([5, -12, 2, 1], -1),
            ([-7, 0], -3),
            ([-1, -1, 1], 0),
        ],
    )
    def test_truncates_toward_zero(self, ratings, expected):
        assert compute_average_rating(ratings) == expected


class TestComputeTermFrequencies:
    def test_frequencies_are_shares_of_words(self):
        frequencies = compute_term_frequencies(["пушистый", "кот", "пушистый", "хвост"])

        assert frequencies == {"пушистый": 0.5, "кот": 0.25, "хвост": 0.25}

    def test_empty_document_has_no_frequencies(self):
        assert compute_term_frequencies([]) == {}


class TestCalculateIdf:
    def test_natural_log_ratio(self):
        assert calculate_idf(1, 4) == pytest.approx(math.log(4))
        assert calculate_idf(2, 4) == pytest.approx(0.693147, abs=1e-6)

    def test_word_in_every_document_has_zero_idf(self):
        assert calculate_idf(3, 3) == 0.0

    @pytest.mark.parametrize(("doc_freq", "total_docs"), [(0, 4), (1, 0), (-1, 3)])
    def test_degenerate_inputs(self, doc_freq, total_docs):
        assert calculate_idf(doc_freq, total_docs) == 0.0
