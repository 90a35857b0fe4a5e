"""Persistent title to ISBN cache."""

from isbnlookup.store.appwrite import AppwriteConfig, AppwriteStore
from isbnlookup.store.base import CacheStore

__all__ = [
    "AppwriteConfig",
    "AppwriteStore",
    "CacheStore",
]
