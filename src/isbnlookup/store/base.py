"""Abstract cache store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from isbnlookup.core.models import LookupResult


class CacheStore(ABC):
    """Persistent title to ISBN mapping consulted before any external source."""

    @abstractmethod
    async def find(self, title: str) -> LookupResult:
        """Return the first record matching ``title`` exactly."""
        ...

    @abstractmethod
    async def insert(self, title: str, isbn: str, author: str | None = None) -> bool:
        """Best-effort write of a resolved title."""
        ...

    async def ping(self) -> bool:
        """Whether the store is reachable."""
        return True

    async def close(self) -> None:
        """Release any held resources."""
