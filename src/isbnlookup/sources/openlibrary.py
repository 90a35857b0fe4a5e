"""OpenLibrary source implementation."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field

from isbnlookup.core.models import BookCandidate
from isbnlookup.core.types import SourceName
from isbnlookup.sources.base import AbstractSource, SourceConfig


class OpenLibraryDoc(BaseModel):
    """One entry of ``docs`` in a search.json response."""

    key: str | None = None
    title: str | None = None
    isbn: list[str] = Field(default_factory=list)
    author_name: list[str] = Field(default_factory=list)


class OpenLibrarySearchResponse(BaseModel):
    """Subset of the search.json response we rely on."""

    num_found: int | None = Field(default=None, alias="numFound")
    docs: list[OpenLibraryDoc] = Field(default_factory=list)


class OpenLibrarySource(AbstractSource):
    """
    OpenLibrary search API (free, no API key required).

    API Documentation: https://openlibrary.org/dev/docs/api/search
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.OPEN_LIBRARY
    BASE_URL: ClassVar[str] = "https://openlibrary.org"

    def __init__(self, config: SourceConfig | None = None) -> None:
        super().__init__(config)

    async def _search(self, title: str) -> BookCandidate | None:
        params: dict[str, Any] = {
            "title": title,
            "limit": 1,
        }
        data = await self._get_json("/search.json", params=params)
        response = self._decode(OpenLibrarySearchResponse, data)

        if not response.docs:
            return None

        doc = response.docs[0]
        if not doc.isbn:
            return None

        return BookCandidate(
            isbn=doc.isbn[0],
            author=doc.author_name[0] if doc.author_name else None,
            source=self.source_name,
        )
