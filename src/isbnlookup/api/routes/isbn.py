"""Title to ISBN endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from isbnlookup.api.dependencies import TitleResolver
from isbnlookup.api.schemas import ErrorResponse, IsbnResponse
from isbnlookup.core.exceptions import IsbnLookupError, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["isbn"])


@router.get(
    "/isbn",
    response_model=IsbnResponse,
    responses={404: {"model": ErrorResponse}},
    operation_id="getIsbn",
    summary="Resolve a title to an ISBN",
    description=(
        "Return the canonical ISBN and author for a book title, "
        "checking the cache before querying external sources."
    ),
)
async def get_isbn(
    resolver: TitleResolver,
    title: str = Query(..., description="Book title, matched verbatim"),
) -> IsbnResponse:
    """Resolve a title through the cache and external sources."""
    try:
        outcome = await resolver.resolve(title)
    except Exception as e:
        logger.exception(f"Resolution failed for {title!r}")
        raise IsbnLookupError(f"Lookup failed for title: {title} ({e})") from e

    if not outcome.found:
        raise NotFoundError(title)

    return IsbnResponse.from_book(outcome.book)
