"""HTTP API for title to ISBN lookups."""

from isbnlookup.api.app import create_app

__all__ = ["create_app"]
