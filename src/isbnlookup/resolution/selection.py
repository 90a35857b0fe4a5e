"""Picking the most plausible candidate out of several sources."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from isbnlookup.core.models import BookCandidate


def select_candidate(candidates: Sequence[BookCandidate]) -> BookCandidate | None:
    """
    Majority vote on author.

    Authors are compared exactly (case-sensitive, no normalization). The
    author seen most often wins; on a tie the earliest candidate in the given
    order wins, so callers pass candidates in source priority order.

    Returns:
        The first candidate carrying a winning author, or None if empty
    """
    if not candidates:
        return None

    counts = Counter(candidate.author for candidate in candidates)
    top = max(counts.values())

    return next(c for c in candidates if counts[c.author] == top)
