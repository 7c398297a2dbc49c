"""Shared test fixtures and configuration."""

import pytest

from search_server import DocumentStatus, SearchServer


# Complete test environment that overrides every configurable value
TEST_ENV = {
    "SEARCH_SERVER_STOP_WORDS": "",
    "SEARCH_SERVER_LOG_LEVEL": "info",
    "SEARCH_SERVER_LOG_JSON": "true",
    "SEARCH_SERVER_REQUEST_HISTORY_SIZE": "1440",
    "SEARCH_SERVER_PAGE_SIZE": "2",
    "SEARCH_SERVER_TRACING_ENABLED": "false",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Pin test defaults and keep a stray .env file from leaking in."""
    monkeypatch.chdir(tmp_path)
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def pet_server() -> SearchServer:
    """Index of four documents about pets, one of them banned."""
    server = SearchServer("и в на")
    server.add_document(0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(3, "ухоженный скворец евгений", DocumentStatus.BANNED, [9])
    return server


@pytest.fixture
def city_server() -> SearchServer:
    """Index of documents that all mention the city."""
    server = SearchServer("and")
    server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(43, "dog in the city", DocumentStatus.ACTUAL, [1, 2, 3])
    return server
