"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import Callable, ClassVar

import pytest

from isbnlookup.config import IsbnLookupSettings
from isbnlookup.core.models import BookCandidate, CacheRecord, LookupResult
from isbnlookup.core.types import SourceName
from isbnlookup.sources.base import AbstractSource
from isbnlookup.store.base import CacheStore

# ============================================================================
# Test Data Constants
# ============================================================================


HOBBIT_TITLE = "The Hobbit"
HOBBIT_ISBN = "9780345339683"
HOBBIT_AUTHOR = "J.R.R. Tolkien"

DUNE_TITLE = "Dune"
DUNE_ISBN = "9780441013593"
DUNE_AUTHOR = "Frank Herbert"

APPWRITE_ENDPOINT = "https://appwrite.test/v1"
APPWRITE_DOCUMENTS_URL = f"{APPWRITE_ENDPOINT}/databases/library/collections/titles/documents"


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def hobbit_candidate() -> BookCandidate:
    """Open Library candidate for The Hobbit."""
    return BookCandidate(
        isbn=HOBBIT_ISBN,
        author=HOBBIT_AUTHOR,
        source=SourceName.OPEN_LIBRARY,
    )


@pytest.fixture
def dune_record() -> CacheRecord:
    """A cached mapping for Dune."""
    return CacheRecord(
        document_id="doc-dune",
        title=DUNE_TITLE,
        isbn=DUNE_ISBN,
        author=DUNE_AUTHOR,
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> IsbnLookupSettings:
    """Create mock settings for testing."""
    return IsbnLookupSettings(
        appwrite_endpoint=APPWRITE_ENDPOINT,
        appwrite_project_id="test-project",
        appwrite_api_key="test-api-key",
        appwrite_database_id="library",
        appwrite_collection_id="titles",
        google_books_api_key="test-google-key",
        http_timeout=5.0,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_settings_minimal() -> IsbnLookupSettings:
    """Create settings with only the required store fields."""
    return IsbnLookupSettings(
        appwrite_endpoint=APPWRITE_ENDPOINT,
        appwrite_project_id="test-project",
        appwrite_api_key="test-api-key",
        appwrite_database_id="library",
        appwrite_collection_id="titles",
    )


# ============================================================================
# Collaborator Doubles
# ============================================================================


class FakeStore(CacheStore):
    """In-memory cache store recording every call."""

    def __init__(
        self,
        records: list[CacheRecord] | None = None,
        *,
        fail_find: bool = False,
        fail_insert: bool = False,
        raise_on_insert: bool = False,
    ) -> None:
        self.records = list(records or [])
        self.fail_find = fail_find
        self.fail_insert = fail_insert
        self.raise_on_insert = raise_on_insert
        self.find_calls: list[str] = []
        self.inserts: list[tuple[str, str, str | None]] = []
        self.closed = False

    async def find(self, title: str) -> LookupResult:
        self.find_calls.append(title)
        if self.fail_find:
            return LookupResult.error(SourceName.CACHE, "store unreachable")
        for record in self.records:
            if record.title == title:
                return LookupResult.found(record.to_candidate())
        return LookupResult.absent(SourceName.CACHE)

    async def insert(self, title: str, isbn: str, author: str | None = None) -> bool:
        self.inserts.append((title, isbn, author))
        if self.raise_on_insert:
            raise RuntimeError("insert exploded")
        if self.fail_insert:
            return False
        self.records.append(CacheRecord(title=title, isbn=isbn, author=author))
        return True

    async def close(self) -> None:
        self.closed = True


class StubSource(AbstractSource):
    """Source returning a preset candidate without any HTTP."""

    SOURCE_NAME: ClassVar[SourceName] = SourceName.OPEN_LIBRARY
    BASE_URL: ClassVar[str] = "https://example.com"

    def __init__(
        self,
        source_name: SourceName,
        isbn: str | None = None,
        author: str | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        super().__init__()
        self._source_name = source_name
        self._isbn = isbn
        self._author = author
        self._error = error
        self.calls: list[str] = []

    @property
    def source_name(self) -> SourceName:
        return self._source_name

    async def _search(self, title: str) -> BookCandidate | None:
        self.calls.append(title)
        if self._error is not None:
            raise self._error
        if self._isbn is None:
            return None
        return BookCandidate(isbn=self._isbn, author=self._author, source=self._source_name)


@pytest.fixture
def make_store() -> Callable[..., FakeStore]:
    """Factory fixture for in-memory stores."""
    return FakeStore


@pytest.fixture
def make_source() -> Callable[..., StubSource]:
    """Factory fixture for stub sources."""
    return StubSource
