"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from isbnlookup.resolution.resolver import Resolver


async def get_resolver(request: Request) -> Resolver:
    """Get the resolver from app state."""
    return request.app.state.resolver


# Type alias for cleaner dependency injection
TitleResolver = Annotated[Resolver, Depends(get_resolver)]
