"""Core enums and type definitions."""

from enum import StrEnum


class SourceName(StrEnum):
    """Places a book candidate can come from, in priority order."""

    CACHE = "cache"
    OPEN_LIBRARY = "open_library"
    GOOGLE_BOOKS = "google_books"


class LookupStatus(StrEnum):
    """Outcome of a single cache or source lookup."""

    PRESENT = "present"
    ABSENT = "absent"
    ERROR = "error"
