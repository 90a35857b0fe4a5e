"""Appwrite document store used as the title to ISBN cache."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from isbnlookup.core.exceptions import ParseError, TransportError
from isbnlookup.core.models import CacheRecord, LookupResult
from isbnlookup.core.types import SourceName
from isbnlookup.http import HttpAdapter
from isbnlookup.store.base import CacheStore

logger = logging.getLogger(__name__)

STORE_NAME = "appwrite"

ISBN_ATTRIBUTE = "canonicalIsbn"
AUTHOR_ATTRIBUTE = "author"


class AppwriteConfig(BaseModel):
    """Connection details for one Appwrite collection."""

    endpoint: str
    project_id: str
    api_key: str
    database_id: str
    collection_id: str
    timeout: float = 30.0
    store_author: bool = True

    @property
    def documents_path(self) -> str:
        return (
            f"/databases/{self.database_id}"
            f"/collections/{self.collection_id}/documents"
        )


class AppwriteDocument(BaseModel):
    """
    A cache document as returned by Appwrite.

    The collection schema is ``{title, canonicalIsbn}``, optionally with an
    ``author`` attribute.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = Field(default=None, alias="$id")
    title: str | None = None
    canonical_isbn: str | None = Field(default=None, alias=ISBN_ATTRIBUTE)
    author: str | None = Field(default=None, alias=AUTHOR_ATTRIBUTE)


class DocumentList(BaseModel):
    total: int | None = None
    documents: list[AppwriteDocument] = Field(default_factory=list)


def equal_query(attribute: str, value: Any) -> str:
    """Build an Appwrite ``equal`` query string."""
    return json.dumps({"method": "equal", "attribute": attribute, "values": [value]})


def limit_query(limit: int) -> str:
    """Build an Appwrite ``limit`` query string."""
    return json.dumps({"method": "limit", "values": [limit]})


class AppwriteStore(HttpAdapter, CacheStore):
    """
    Cache-aside store backed by an Appwrite collection.

    The collection holds ``title``, ``canonicalIsbn`` and ``author`` string
    attributes. Turn ``store_author`` off for collections without an
    ``author`` attribute, since Appwrite rejects undefined attributes; hits
    from such a collection carry no author.
    Lookups are plain equality matches on ``title``; inserts are best effort
    and do not check for an existing document, so two concurrent misses for
    the same title can both write a record.
    """

    def __init__(self, config: AppwriteConfig) -> None:
        self.config = config
        super().__init__(config.endpoint.rstrip("/"), config.timeout)

    @property
    def adapter_name(self) -> str:
        return STORE_NAME

    def _get_default_headers(self) -> dict[str, str]:
        return {
            **super()._get_default_headers(),
            "Content-Type": "application/json",
            "X-Appwrite-Project": self.config.project_id,
            "X-Appwrite-Key": self.config.api_key,
        }

    async def _find_record(self, title: str) -> CacheRecord | None:
        params = {"queries[]": [equal_query("title", title), limit_query(1)]}

        async with self._get_client() as client:
            response = await client.get(self.config.documents_path, params=params)

        self._check_status(response)

        try:
            documents = DocumentList.model_validate(response.json()).documents
        except (ValueError, ValidationError) as e:
            raise ParseError(message=f"Malformed document list: {e}", source=STORE_NAME) from e

        if not documents or not documents[0].canonical_isbn:
            return None

        doc = documents[0]
        return CacheRecord(
            document_id=doc.id,
            title=doc.title if doc.title is not None else title,
            isbn=doc.canonical_isbn,
            author=doc.author,
        )

    async def find(self, title: str) -> LookupResult:
        """
        Look up a previously resolved title.

        Failures are logged and reported as an ERROR result; callers treat
        them the same as a miss.
        """
        start = time.monotonic()

        try:
            record = await self._find_record(title)
        except (TransportError, ParseError) as e:
            logger.error(f"Cache lookup failed for {title!r}: {e.message}")
            return LookupResult.error(
                SourceName.CACHE, e.message, (time.monotonic() - start) * 1000
            )

        duration_ms = (time.monotonic() - start) * 1000
        if record is None:
            return LookupResult.absent(SourceName.CACHE, duration_ms)

        return LookupResult.found(record.to_candidate(), duration_ms)

    async def ping(self) -> bool:
        """Check the collection is reachable with the configured credentials."""
        try:
            async with self._get_client() as client:
                response = await client.get(
                    self.config.documents_path,
                    params={"queries[]": [limit_query(1)]},
                )
        except TransportError as e:
            logger.warning(f"Cache ping failed: {e.message}")
            return False
        return response.is_success

    async def insert(self, title: str, isbn: str, author: str | None = None) -> bool:
        """
        Write a title to ISBN mapping.

        Returns True if the store acknowledged the write. Errors are logged
        and never raised.
        """
        data: dict[str, Any] = {"title": title, ISBN_ATTRIBUTE: isbn}
        if self.config.store_author and author is not None:
            data[AUTHOR_ATTRIBUTE] = author

        body = {"documentId": "unique()", "data": data}

        try:
            async with self._get_client() as client:
                response = await client.post(self.config.documents_path, json=body)
        except TransportError as e:
            logger.error(f"Cache insert failed for {title!r}: {e.message}")
            return False

        if not response.is_success:
            logger.error(
                f"Cache insert failed for {title!r}: status {response.status_code}"
            )
            return False

        logger.debug(f"Cached {title!r} -> {isbn}")
        return True
