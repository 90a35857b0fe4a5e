"""Custom exception hierarchy for isbnlookup."""

from typing import Any


class IsbnLookupError(Exception):
    """Base exception for all isbnlookup errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(IsbnLookupError):
    """Outbound call failed to connect or returned a non-2xx status."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class ParseError(IsbnLookupError):
    """Response payload did not have the expected shape."""

    def __init__(
        self,
        message: str,
        source: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source


class NotFoundError(IsbnLookupError):
    """No candidate was found for a title in the cache or any source."""

    def __init__(self, title: str) -> None:
        super().__init__(f"No ISBN found for title: {title}", {"title": title})
        self.title = title
