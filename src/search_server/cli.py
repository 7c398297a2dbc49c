"""Line-oriented console front end for the search server.

Input format on stdin::

    <stop words>
    <document count N>
    <document text>           # repeated N times, each followed by
    <k> <rating 1> ... <k>    # its ratings line
    <query>                   # every remaining non-empty line

Documents receive ids ``0..N-1`` and status ACTUAL.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from search_server.config import Settings
from search_server.domain.model import DocumentStatus
from search_server.errors import DocumentNotFoundError, InvalidArgumentError
from search_server.observability.logging import configure_logging
from search_server.observability.tracing import init_tracing
from search_server.search.paginator import paginate
from search_server.search.request_queue import RequestQueue
from search_server.search.server import SearchServer


logger = logging.getLogger(__name__)


def read_line(stream: TextIO) -> str:
    """Read one line without its trailing newline; raise EOFError at end of input."""
    line = stream.readline()
    if not line:
        raise EOFError("Unexpected end of input")
    return line.rstrip("\r\n")


def read_line_with_number(stream: TextIO) -> int:
    raw = read_line(stream).strip()
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"Expected a number, got {raw!r}") from exc


def parse_ratings(line: str) -> list[int]:
    """Parse ``"<k> <r1> ... <rk>"`` into the list of ``k`` ratings."""
    try:
        numbers = [int(value) for value in line.split()]
    except ValueError as exc:
        raise InvalidArgumentError(f"Ratings must be integers, got {line!r}") from exc
    if not numbers:
        return []
    count, ratings = numbers[0], numbers[1:]
    if count != len(ratings):
        raise InvalidArgumentError(f"Expected {count} ratings, got {len(ratings)}")
    return ratings


def load_documents(server: SearchServer, stream: TextIO) -> int:
    """Read the document block from ``stream`` into ``server``; return how many were added."""
    document_count = read_line_with_number(stream)
    for document_id in range(document_count):
        text = read_line(stream)
        ratings = parse_ratings(read_line(stream))
        server.add_document(document_id, text, DocumentStatus.ACTUAL, ratings)
    logger.info("Indexed %d documents", document_count)
    return document_count


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="search-server",
        description="Index documents from stdin and answer TF-IDF queries",
    )
    parser.add_argument(
        "--status",
        choices=[status.name.lower() for status in DocumentStatus],
        help="Only return documents with this status (default: actual)",
    )
    parser.add_argument(
        "--match",
        type=int,
        metavar="DOCUMENT_ID",
        help="Print the query words matched in this document instead of searching",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        help="Results per printed page (defaults to SEARCH_SERVER_PAGE_SIZE)",
    )
    parser.add_argument(
        "--log-level",
        help="Override SEARCH_SERVER_LOG_LEVEL",
    )
    return parser


def _print_search(
    queue: RequestQueue,
    raw_query: str,
    status: DocumentStatus | None,
    page_size: int,
    out: TextIO,
) -> None:
    documents = queue.add_find_request(raw_query, status)
    print(f"Results for query: {raw_query}", file=out)
    for number, page in enumerate(paginate(documents, page_size), start=1):
        print(f"Page {number}:", file=out)
        for document in page:
            print(f"  {document}", file=out)


def _print_match(server: SearchServer, raw_query: str, document_id: int, out: TextIO) -> None:
    words, status = server.match_document(raw_query, document_id)
    print(
        f"{{ document_id = {document_id}, status = {status.value}, words = {' '.join(words)} }}",
        file=out,
    )


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    source = stdin or sys.stdin
    out = stdout or sys.stdout

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    configure_logging(args.log_level or settings.log_level, settings.log_json)
    if settings.tracing_enabled:
        init_tracing()

    page_size = args.page_size if args.page_size is not None else settings.page_size
    if page_size <= 0:
        logger.error("Page size must be positive, got %d", page_size)
        return 1
    status = DocumentStatus[args.status.upper()] if args.status else None

    try:
        stop_words = read_line(source).split(" ") + settings.get_stop_words()
        server = SearchServer(stop_words)
        load_documents(server, source)
    except EOFError as exc:
        logger.error("Incomplete input: %s", exc)
        return 1
    except InvalidArgumentError as exc:
        logger.error("Invalid input: %s", exc)
        return 1

    queue = RequestQueue(server, settings.request_history_size)
    exit_code = 0
    for line in source:
        raw_query = line.rstrip("\r\n")
        if not raw_query.strip():
            continue
        try:
            if args.match is not None:
                _print_match(server, raw_query, args.match, out)
            else:
                _print_search(queue, raw_query, status, page_size, out)
        except InvalidArgumentError as exc:
            logger.error("Invalid query %r: %s", raw_query, exc)
            exit_code = 1
        except DocumentNotFoundError as exc:
            logger.error("%s", exc)
            return 1

    logger.info(
        "%d recent queries retained, %d without results",
        len(queue),
        queue.get_no_result_requests(),
    )
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
