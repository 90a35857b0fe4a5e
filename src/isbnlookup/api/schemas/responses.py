"""Response bodies for the HTTP API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from isbnlookup.core.models import BookCandidate

ServiceStatus = Literal["up", "down", "unknown"]
OverallStatus = Literal["healthy", "degraded", "unhealthy"]


class IsbnResponse(BaseModel):
    """Canonical ISBN for a title. ``author`` is always serialized, possibly as null."""

    isbn: str
    author: str | None = None

    @classmethod
    def from_book(cls, book: BookCandidate) -> IsbnResponse:
        return cls(isbn=book.isbn, author=book.author)


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: OverallStatus
    version: str
    services: dict[str, ServiceStatus]
