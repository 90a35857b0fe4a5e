"""External bibliographic sources queried on a cache miss."""

from isbnlookup.sources.base import AbstractSource, SourceConfig
from isbnlookup.sources.google_books import GoogleBooksSource
from isbnlookup.sources.openlibrary import OpenLibrarySource

__all__ = [
    "AbstractSource",
    "GoogleBooksSource",
    "OpenLibrarySource",
    "SourceConfig",
]
