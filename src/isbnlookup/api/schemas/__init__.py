"""API schema definitions."""

from isbnlookup.api.schemas.responses import (
    ErrorResponse,
    HealthResponse,
    IsbnResponse,
    OverallStatus,
    ServiceStatus,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "IsbnResponse",
    "OverallStatus",
    "ServiceStatus",
]
