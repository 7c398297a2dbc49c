"""Tests for the console front end."""

import io
import logging

import pytest

from search_server.cli import build_argument_parser, main, parse_ratings, read_line, read_line_with_number
from search_server.errors import InvalidArgumentError


PET_INPUT = (
    "и в на\n"
    "3\n"
    "белый кот и модный ошейник\n"
    "2 8 -3\n"
    "пушистый кот пушистый хвост\n"
    "3 7 2 7\n"
    "ухоженный пёс выразительные глаза\n"
    "4 5 -12 2 1\n"
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _run(argv: list[str], text: str) -> tuple[int, str]:
    out = io.StringIO()
    code = main(argv, stdin=io.StringIO(text), stdout=out)
    return code, out.getvalue()


class TestInputHelpers:
    def test_read_line_keeps_inner_spaces(self):
        stream = io.StringIO("  cat  dog \nnext\n")

        assert read_line(stream) == "  cat  dog "
        assert read_line(stream) == "next"
        with pytest.raises(EOFError):
            read_line(stream)

    def test_read_line_with_number(self):
        assert read_line_with_number(io.StringIO(" 12 \n")) == 12
        with pytest.raises(InvalidArgumentError):
            read_line_with_number(io.StringIO("twelve\n"))

    def test_parse_ratings(self):
        assert parse_ratings("3 7 2 7") == [7, 2, 7]
        assert parse_ratings("0") == []
        assert parse_ratings("") == []

    @pytest.mark.parametrize("line", ["2 1", "1 x", "3 1 2 3 4"])
    def test_parse_ratings_rejects_malformed_lines(self, line):
        with pytest.raises(InvalidArgumentError):
            parse_ratings(line)


class TestMain:
    def test_search_prints_paginated_results(self):
        code, output = _run([], PET_INPUT + "пушистый ухоженный кот\n")

        assert code == 0
        assert output.startswith("Results for query: пушистый ухоженный кот\nPage 1:\n")
        assert "Page 2:" in output
        assert "Page 3:" not in output
        positions = [output.index(f"document_id = {document_id},") for document_id in (1, 2, 0)]
        assert positions == sorted(positions)

    def test_page_size_option(self):
        _, output = _run(["--page-size", "1"], PET_INPUT + "пушистый ухоженный кот\n")

        assert "Page 3:" in output

    def test_status_filter_without_matches(self):
        _, output = _run(["--status", "banned"], PET_INPUT + "кот\n")

        assert output == "Results for query: кот\n"

    def test_match_mode(self):
        _, output = _run(["--match", "1"], PET_INPUT + "пушистый кот -ошейник\nкот -хвост\n")

        assert output.splitlines() == [
            "{ document_id = 1, status = 0, words = кот пушистый }",
            "{ document_id = 1, status = 0, words =  }",
        ]

    def test_match_unknown_document_fails(self):
        code, _ = _run(["--match", "9"], PET_INPUT + "кот\n")

        assert code == 1

    def test_bad_query_is_reported_and_processing_continues(self):
        code, output = _run([], PET_INPUT + "кот --хвост\nхвост\n")

        assert code == 1
        assert "Results for query: хвост" in output
        assert "кот --хвост" not in output

    def test_blank_query_lines_are_skipped(self):
        code, output = _run([], PET_INPUT + "\n   \n")

        assert code == 0
        assert output == ""

    def test_truncated_input_fails(self):
        code, _ = _run([], "и в на\n2\nбелый кот\n1 5\n")

        assert code == 1

    def test_invalid_document_fails(self):
        code, _ = _run([], "и\n1\nбелый\x01кот\n1 5\n")

        assert code == 1

    def test_invalid_configuration_fails(self, monkeypatch):
        monkeypatch.setenv("SEARCH_SERVER_PAGE_SIZE", "0")

        code, _ = _run([], PET_INPUT)

        assert code == 1

    def test_stop_words_from_environment(self, monkeypatch):
        monkeypatch.setenv("SEARCH_SERVER_STOP_WORDS", "кот")

        _, output = _run([], PET_INPUT + "кот\n")

        assert output == "Results for query: кот\n"

    def test_rejects_unknown_status(self):
        with pytest.raises(SystemExit):
            build_argument_parser().parse_args(["--status", "deleted"])
