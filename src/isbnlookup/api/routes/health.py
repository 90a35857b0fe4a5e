"""Health check endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from isbnlookup import __version__
from isbnlookup.api.schemas import HealthResponse, OverallStatus, ServiceStatus
from isbnlookup.store.base import CacheStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


async def _probe_cache(store: CacheStore) -> ServiceStatus:
    try:
        return "up" if await store.ping() else "down"
    except Exception as e:
        logger.warning(f"Cache probe raised: {e}")
        return "down"


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Report cache reachability and the configured sources.",
)
async def health_check(request: Request) -> HealthResponse:
    """
    Probe the cache store; external sources are listed but never probed.

    A down cache only degrades the service, since lookups fall through to
    the external sources.
    """
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        return HealthResponse(status="unhealthy", version=__version__, services={})

    services: dict[str, ServiceStatus] = {"cache": await _probe_cache(resolver.store)}
    services.update({source.source_name.value: "unknown" for source in resolver.sources})

    status: OverallStatus = "healthy" if services["cache"] == "up" else "degraded"
    return HealthResponse(status=status, version=__version__, services=services)


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check whether a resolver has been wired up.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    return {"ready": getattr(request.app.state, "resolver", None) is not None}
