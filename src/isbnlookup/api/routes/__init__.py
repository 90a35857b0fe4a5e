"""API route modules."""

from isbnlookup.api.routes.health import router as health_router
from isbnlookup.api.routes.isbn import router as isbn_router

__all__ = [
    "health_router",
    "isbn_router",
]
