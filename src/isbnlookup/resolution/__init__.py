"""Resolution layer: cache-aside lookup and candidate selection."""

from isbnlookup.resolution.registry import build_resolver, build_sources, build_store
from isbnlookup.resolution.resolver import ResolutionOutcome, Resolver
from isbnlookup.resolution.selection import select_candidate

__all__ = [
    # Resolver
    "ResolutionOutcome",
    "Resolver",
    # Selection
    "select_candidate",
    # Registry
    "build_resolver",
    "build_sources",
    "build_store",
]
