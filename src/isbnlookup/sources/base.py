"""Abstract base source with payload decoding and error mapping."""

from __future__ import annotations

import logging
import time
from abc import abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError

from isbnlookup.core.exceptions import ParseError, TransportError
from isbnlookup.core.models import BookCandidate, LookupResult
from isbnlookup.core.types import SourceName
from isbnlookup.http import HttpAdapter

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """Configuration for an external source."""

    api_key: str | None = None
    base_url: str | None = None
    timeout: float = 30.0


class AbstractSource(HttpAdapter):
    """
    Abstract base class for external bibliographic sources.

    Provides:
    - HTTP client management (see HttpAdapter)
    - Mapping of transport and payload failures to ERROR results
    - Timing of each lookup

    Subclasses only implement ``_search``, which returns a candidate or None
    and may raise TransportError or ParseError.
    """

    # Class-level configuration (to be overridden by subclasses)
    SOURCE_NAME: ClassVar[SourceName]
    BASE_URL: ClassVar[str]

    def __init__(self, config: SourceConfig | None = None) -> None:
        self.config = config or SourceConfig()
        super().__init__(self.config.base_url or self.BASE_URL, self.config.timeout)

    @property
    def source_name(self) -> SourceName:
        """The source type for this adapter."""
        return self.SOURCE_NAME

    @property
    def adapter_name(self) -> str:
        return self.source_name.value

    async def _get_json(self, url: str, **kwargs: Any) -> Any:
        """GET a URL and return the decoded JSON body."""
        async with self._get_client() as client:
            response = await client.get(url, **kwargs)

        self._check_status(response)

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(
                message=f"Invalid JSON body: {e}",
                source=self.adapter_name,
            ) from e

    def _decode(self, model: type[BaseModel], data: Any) -> Any:
        """Validate a payload against its response schema."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ParseError(
                message=f"Unexpected payload shape: {e.error_count()} errors",
                source=self.adapter_name,
            ) from e

    async def search(self, title: str) -> LookupResult:
        """
        Search the source by title.

        Never raises for transport or payload problems; those come back as an
        ERROR result so one failing source does not block the others.
        """
        start = time.monotonic()

        try:
            candidate = await self._search(title)
        except (TransportError, ParseError) as e:
            duration_ms = (time.monotonic() - start) * 1000
            logger.error(f"Source {self.source_name} failed for {title!r}: {e.message}")
            return LookupResult.error(self.source_name, e.message, duration_ms)

        duration_ms = (time.monotonic() - start) * 1000
        if candidate is None:
            logger.debug(f"Source {self.source_name} has no ISBN for {title!r}")
            return LookupResult.absent(self.source_name, duration_ms)

        return LookupResult.found(candidate, duration_ms)

    @abstractmethod
    async def _search(self, title: str) -> BookCandidate | None:
        """
        Query the source and build a candidate from the first result.

        Args:
            title: Book title, used verbatim as the search term

        Returns:
            A candidate if the first result carries an ISBN, otherwise None
        """
        ...
