"""isbnlookup - Resolve book titles to a canonical ISBN with a write-back cache."""

from isbnlookup.client import IsbnLookupClient, resolve_isbn
from isbnlookup.config import IsbnLookupSettings
from isbnlookup.core.models import BookCandidate, CacheRecord, LookupResult
from isbnlookup.core.types import LookupStatus, SourceName
from isbnlookup.resolution.resolver import ResolutionOutcome, Resolver

__version__ = "0.1.0"
__all__ = [
    # Client
    "IsbnLookupClient",
    "resolve_isbn",
    "IsbnLookupSettings",
    # Types
    "LookupStatus",
    "SourceName",
    # Models
    "BookCandidate",
    "CacheRecord",
    "LookupResult",
    # Resolution
    "ResolutionOutcome",
    "Resolver",
    # Version
    "__version__",
]
