"""Exceptions raised by the search server."""


class SearchServerError(Exception):
    """Base error for search server operations."""


class InvalidArgumentError(SearchServerError, ValueError):
    """Raised when a document id, document text, stop word or query is malformed."""


class DocumentNotFoundError(SearchServerError, LookupError):
    """Raised when an operation requires a document id that was never added."""

    def __init__(self, document_id: int) -> None:
        super().__init__(f"Document {document_id} not found")
        self.document_id = document_id
