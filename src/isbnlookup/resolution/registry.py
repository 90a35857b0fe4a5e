"""Builds configured sources and store from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from isbnlookup.core.types import SourceName
from isbnlookup.resolution.resolver import Resolver
from isbnlookup.sources.base import AbstractSource, SourceConfig
from isbnlookup.sources.google_books import GoogleBooksSource
from isbnlookup.sources.openlibrary import OpenLibrarySource
from isbnlookup.store.appwrite import AppwriteConfig, AppwriteStore

if TYPE_CHECKING:
    from isbnlookup.config import IsbnLookupSettings


def build_source(name: SourceName, settings: "IsbnLookupSettings") -> AbstractSource:
    """Create one external source configured from settings."""
    if name == SourceName.OPEN_LIBRARY:
        return OpenLibrarySource(SourceConfig(timeout=settings.http_timeout))
    elif name == SourceName.GOOGLE_BOOKS:
        return GoogleBooksSource(
            SourceConfig(
                api_key=settings.google_books_api_key,
                timeout=settings.http_timeout,
            )
        )
    else:
        raise ValueError(f"Unsupported source: {name}")


def build_sources(settings: "IsbnLookupSettings") -> list[AbstractSource]:
    """Create the enabled sources in priority order."""
    return [build_source(name, settings) for name in settings.sources]


def build_store(settings: "IsbnLookupSettings") -> AppwriteStore:
    """Create the Appwrite cache store."""
    return AppwriteStore(
        AppwriteConfig(
            endpoint=str(settings.appwrite_endpoint),
            project_id=settings.appwrite_project_id,
            api_key=settings.appwrite_api_key,
            database_id=settings.appwrite_database_id,
            collection_id=settings.appwrite_collection_id,
            timeout=settings.http_timeout,
            store_author=settings.appwrite_store_author,
        )
    )


def build_resolver(settings: "IsbnLookupSettings") -> Resolver:
    """Create a resolver wired to the configured store and sources."""
    return Resolver(
        build_store(settings),
        build_sources(settings),
        parallel=settings.parallel_sources,
    )
