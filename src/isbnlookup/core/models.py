"""Domain models for title lookups."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import LookupStatus, SourceName


class BookCandidate(BaseModel):
    """An (isbn, author, source) tuple not yet chosen as the answer."""

    model_config = ConfigDict(frozen=True)

    isbn: str = Field(..., description="ISBN as reported by the source")
    author: str | None = Field(default=None, description="First listed author")
    source: SourceName = Field(..., description="Where the candidate came from")


class CacheRecord(BaseModel):
    """A title to canonical ISBN mapping held in the document store."""

    model_config = ConfigDict(populate_by_name=True)

    document_id: str | None = Field(default=None, description="Store document ID")
    title: str = Field(..., description="Title exactly as it was queried")
    isbn: str = Field(..., description="Canonical ISBN")
    author: str | None = Field(default=None, description="Author stored with the ISBN")

    def to_candidate(self) -> BookCandidate:
        return BookCandidate(isbn=self.isbn, author=self.author, source=SourceName.CACHE)


class LookupResult(BaseModel):
    """Result of one cache or source lookup.

    Keeps "nothing there" (ABSENT) apart from "could not ask" (ERROR), even
    though the resolver treats both as a missing candidate.
    """

    status: LookupStatus
    source: SourceName
    candidate: BookCandidate | None = None
    error_message: str | None = None
    duration_ms: float = 0.0

    @property
    def present(self) -> bool:
        return self.status == LookupStatus.PRESENT and self.candidate is not None

    @classmethod
    def found(
        cls, candidate: BookCandidate, duration_ms: float = 0.0
    ) -> LookupResult:
        return cls(
            status=LookupStatus.PRESENT,
            source=candidate.source,
            candidate=candidate,
            duration_ms=duration_ms,
        )

    @classmethod
    def absent(cls, source: SourceName, duration_ms: float = 0.0) -> LookupResult:
        return cls(status=LookupStatus.ABSENT, source=source, duration_ms=duration_ms)

    @classmethod
    def error(
        cls, source: SourceName, message: str, duration_ms: float = 0.0
    ) -> LookupResult:
        return cls(
            status=LookupStatus.ERROR,
            source=source,
            error_message=message,
            duration_ms=duration_ms,
        )
