"""Shared httpx client lifecycle for outbound adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, Self

import httpx

from isbnlookup.core.exceptions import TransportError


class HttpAdapter(ABC):
    """
    Base for anything that talks to a remote HTTP API.

    Owns a single lazily created ``httpx.AsyncClient`` and maps httpx
    failures to TransportError tagged with ``adapter_name``.
    """

    def __init__(self, base_url: str, timeout: float) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def adapter_name(self) -> str:
        """Name reported as ``source`` on transport errors."""
        ...

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests. Override to add auth."""
        return {
            "User-Agent": "isbnlookup/1.0",
            "Accept": "application/json",
        }

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise TransportError(message=f"HTTP error: {e}", source=self.adapter_name) from e

    def _check_status(self, response: httpx.Response) -> None:
        if not response.is_success:
            raise TransportError(
                message=f"Unexpected status {response.status_code}",
                source=self.adapter_name,
                status_code=response.status_code,
            )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
