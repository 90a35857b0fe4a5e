"""Google Books source implementation."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field

from isbnlookup.core.models import BookCandidate
from isbnlookup.core.types import SourceName
from isbnlookup.sources.base import AbstractSource, SourceConfig

ISBN_13_TYPE = "ISBN_13"


class IndustryIdentifier(BaseModel):
    type: str | None = None
    identifier: str | None = None


class VolumeInfo(BaseModel):
    title: str | None = None
    authors: list[str] = Field(default_factory=list)
    industry_identifiers: list[IndustryIdentifier] = Field(
        default_factory=list, alias="industryIdentifiers"
    )


class Volume(BaseModel):
    id: str | None = None
    volume_info: VolumeInfo | None = Field(default=None, alias="volumeInfo")


class VolumesResponse(BaseModel):
    """Subset of the /volumes response we rely on."""

    total_items: int | None = Field(default=None, alias="totalItems")
    items: list[Volume] = Field(default_factory=list)


class GoogleBooksSource(AbstractSource):
    """
    Google Books API source.

    API Documentation: https://developers.google.com/books/docs/v1/using

    Works without API key but rate limits apply.
    With API key, higher quotas are available.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.GOOGLE_BOOKS
    BASE_URL: ClassVar[str] = "https://www.googleapis.com/books/v1"

    def __init__(self, config: SourceConfig | None = None) -> None:
        super().__init__(config)
        # API key is optional for Google Books
        self._api_key = config.api_key if config else None

    async def _search(self, title: str) -> BookCandidate | None:
        params: dict[str, Any] = {
            "q": f"intitle:{title}",
            "maxResults": 1,
        }
        if self._api_key:
            params["key"] = self._api_key

        data = await self._get_json("/volumes", params=params)
        response = self._decode(VolumesResponse, data)

        if not response.items or response.items[0].volume_info is None:
            return None

        info = response.items[0].volume_info
        isbn = next(
            (
                ident.identifier
                for ident in info.industry_identifiers
                if ident.type == ISBN_13_TYPE and ident.identifier
            ),
            None,
        )
        if isbn is None:
            return None

        return BookCandidate(
            isbn=isbn,
            author=info.authors[0] if info.authors else None,
            source=self.source_name,
        )
