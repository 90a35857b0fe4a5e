"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from isbnlookup import __version__
from isbnlookup.api.routes import health_router, isbn_router
from isbnlookup.config import IsbnLookupSettings
from isbnlookup.core.exceptions import IsbnLookupError, NotFoundError
from isbnlookup.resolution.resolver import Resolver

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    if getattr(app.state, "resolver", None) is None:
        settings = app.state.settings or IsbnLookupSettings()
        logging.basicConfig(level=settings.log_level.upper())

        from isbnlookup.resolution.registry import build_resolver

        logger.info("Initializing resolver...")
        app.state.resolver = build_resolver(settings)
        logger.info(
            f"Resolver ready with sources: {', '.join(settings.sources)}"
            f"{' (parallel)' if settings.parallel_sources else ''}"
        )

    logger.info("Application startup complete")

    yield

    # Cleanup
    logger.info("Shutting down application...")

    if getattr(app.state, "resolver", None) is not None:
        await app.state.resolver.close()

    logger.info("Application shutdown complete")


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": exc.message})


async def lookup_error_handler(request: Request, exc: IsbnLookupError) -> JSONResponse:
    """Internal failures are reported as a failed lookup, never a 5xx."""
    logger.error(f"Lookup error on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=404, content={"error": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed requests, such as a missing ``title``, are a failed lookup too."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(status_code=404, content={"error": f"Invalid request: {problems}"})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=404, content={"error": f"Lookup failed: {exc}"})


def create_app(
    *,
    settings: IsbnLookupSettings | None = None,
    resolver: Resolver | None = None,
    title: str = "isbnlookup API",
    description: str = "Resolve book titles to a canonical ISBN and author",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings used to build the resolver at startup
        resolver: Prebuilt resolver; skips building one from settings
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.resolver = resolver

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(IsbnLookupError, lookup_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    # Register routes
    app.include_router(health_router)
    app.include_router(isbn_router)

    return app


# For uvicorn direct execution
app = create_app()
