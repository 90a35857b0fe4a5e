"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from isbnlookup.config import IsbnLookupSettings
from isbnlookup.resolution.registry import build_resolver
from isbnlookup.resolution.resolver import ResolutionOutcome, Resolver

logger = logging.getLogger(__name__)


class IsbnLookupClient:
    """
    Main client for the isbnlookup library.

    Resolves book titles through the cache and external sources without
    requiring the web server.

    Usage:
        async with IsbnLookupClient() as client:
            outcome = await client.resolve("The Hobbit")
            if outcome.found:
                print(outcome.book.isbn, outcome.book.author)

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(self, settings: IsbnLookupSettings | None = None) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
        """
        self._settings = settings or IsbnLookupSettings()
        self._resolver: Resolver | None = None

    async def __aenter__(self) -> IsbnLookupClient:
        """Initialize resources on context entry."""
        self._resolver = build_resolver(self._settings)
        logger.debug(
            f"Client initialized with sources: {', '.join(self._settings.sources)}"
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def close(self) -> None:
        """Close all resources."""
        if self._resolver:
            await self._resolver.close()
            self._resolver = None

    async def resolve(self, title: str) -> ResolutionOutcome:
        """
        Resolve a book title to its canonical ISBN and author.

        Args:
            title: Book title, used verbatim

        Returns:
            Outcome holding the chosen book, or none if nothing was found
        """
        if self._resolver is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with IsbnLookupClient() as client:'"
            )
        return await self._resolver.resolve(title)


async def resolve_isbn(
    title: str,
    *,
    settings: IsbnLookupSettings | None = None,
) -> ResolutionOutcome:
    """
    Resolve a title (convenience function).

    For multiple resolutions, use IsbnLookupClient for better performance.
    """
    async with IsbnLookupClient(settings) as client:
        return await client.resolve(title)
