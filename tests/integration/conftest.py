"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from isbnlookup.api.app import create_app
from isbnlookup.core.types import SourceName
from isbnlookup.resolution.resolver import Resolver

# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def store(make_store, dune_record):
    """Cache store already holding Dune."""
    return make_store([dune_record])


@pytest.fixture
def open_library(make_source):
    return make_source(SourceName.OPEN_LIBRARY, "9780345339683", "J.R.R. Tolkien")


@pytest.fixture
def google_books(make_source):
    return make_source(SourceName.GOOGLE_BOOKS)


@pytest.fixture
def resolver(store, open_library, google_books) -> Resolver:
    return Resolver(store, [open_library, google_books])


@pytest.fixture
def app(resolver: Resolver) -> FastAPI:
    """Application wired to in-memory collaborators."""
    return create_app(resolver=resolver)


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
