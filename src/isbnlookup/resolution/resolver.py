"""Cache-aside title resolution."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from isbnlookup.core.models import BookCandidate, LookupResult
from isbnlookup.core.types import SourceName
from isbnlookup.resolution.selection import select_candidate
from isbnlookup.sources.base import AbstractSource
from isbnlookup.store.base import CacheStore

logger = logging.getLogger(__name__)


@dataclass
class ResolutionOutcome:
    """Result of resolving one title."""

    title: str
    book: BookCandidate | None = None
    cache_hit: bool = False
    lookups: list[LookupResult] = field(default_factory=list)
    stored: bool = False

    @property
    def found(self) -> bool:
        return self.book is not None

    @property
    def candidates(self) -> list[BookCandidate]:
        """Candidates produced by the lookups, in priority order."""
        return [r.candidate for r in self.lookups if r.present and r.candidate]


class Resolver:
    """
    Resolves a book title to a canonical ISBN and author.

    Flow:
    1. Look the title up in the cache store
    2. On a hit, return it without touching any source
    3. Otherwise ask every configured source for its first result
    4. Pick the candidate whose author most sources agree on
    5. Write the winner back to the store (best effort)

    Store and source failures never propagate; they degrade to a miss for
    that step. Lookup and write-back are not atomic, so concurrent misses for
    one title may each write a record.
    """

    def __init__(
        self,
        store: CacheStore,
        sources: Sequence[AbstractSource],
        *,
        parallel: bool = False,
    ) -> None:
        self._store = store
        self._sources = list(sources)
        self._parallel = parallel

    @property
    def store(self) -> CacheStore:
        return self._store

    @property
    def sources(self) -> list[AbstractSource]:
        return list(self._sources)

    async def resolve(self, title: str) -> ResolutionOutcome:
        """Resolve a title, consulting the cache first."""
        start = time.monotonic()
        outcome = ResolutionOutcome(title=title)

        cached = await self._try_cache(title)
        outcome.lookups.append(cached)
        if cached.present:
            logger.info(f"Cache hit for {title!r}")
            outcome.book = cached.candidate
            outcome.cache_hit = True
            return outcome

        logger.debug(f"Cache miss for {title!r}")

        outcome.lookups.extend(await self._lookup_sources(title))
        outcome.book = select_candidate(outcome.candidates)

        if outcome.book is None:
            logger.info(f"No candidate for {title!r} from {len(self._sources)} sources")
            return outcome

        outcome.stored = await self._try_store(title, outcome.book)

        duration = time.monotonic() - start
        logger.info(
            f"Resolved {title!r} to {outcome.book.isbn} via {outcome.book.source} "
            f"in {duration:.2f}s"
        )
        return outcome

    async def _try_cache(self, title: str) -> LookupResult:
        try:
            return await self._store.find(title)
        except Exception as e:
            logger.exception(f"Cache lookup raised for {title!r}: {e}")
            return LookupResult.error(SourceName.CACHE, str(e))

    async def _try_source(self, source: AbstractSource, title: str) -> LookupResult:
        """Query a single source with error handling."""
        try:
            return await source.search(title)
        except Exception as e:
            logger.exception(f"Source {source.source_name} failed: {e}")
            return LookupResult.error(source.source_name, str(e))

    async def _lookup_sources(self, title: str) -> list[LookupResult]:
        """Query sources; results keep the configured priority order."""
        if self._parallel:
            tasks = [self._try_source(source, title) for source in self._sources]
            return list(await asyncio.gather(*tasks))

        results = []
        for source in self._sources:
            results.append(await self._try_source(source, title))
        return results

    async def _try_store(self, title: str, book: BookCandidate) -> bool:
        try:
            stored = await self._store.insert(title, book.isbn, book.author)
        except Exception as e:
            logger.exception(f"Cache insert raised for {title!r}: {e}")
            return False

        if not stored:
            logger.warning(f"Resolved {title!r} but could not cache it")
        return stored

    async def close(self) -> None:
        """Close the store and all sources."""
        for source in self._sources:
            await source.close()
        await self._store.close()

    async def __aenter__(self) -> "Resolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
