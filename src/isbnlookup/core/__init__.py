"""Core types, models, and exceptions."""

from .exceptions import IsbnLookupError, NotFoundError, ParseError, TransportError
from .models import BookCandidate, CacheRecord, LookupResult
from .types import LookupStatus, SourceName

__all__ = [
    # Types
    "LookupStatus",
    "SourceName",
    # Models
    "BookCandidate",
    "CacheRecord",
    "LookupResult",
    # Exceptions
    "IsbnLookupError",
    "NotFoundError",
    "ParseError",
    "TransportError",
]
