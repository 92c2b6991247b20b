"""
Prefix completion over a FrequencyIndex.
"""

import logging
from typing import List

from .index import FrequencyIndex
from .models import Candidate

logger = logging.getLogger(__name__)


def _rank_key(candidate: Candidate):
    # Most frequent first, equal counts in alphabetical order
    return (-candidate.count, candidate.word)


def complete(index: FrequencyIndex, prefix: str, limit: int) -> List[str]:
    """
    Finds the most frequent words that start with the given prefix.

    The match is literal and case-sensitive. The index only holds lowercase
    words, so callers wanting case-insensitive matching must lowercase the
    prefix themselves. An empty prefix matches every word.

    Args:
        index: The word frequency index to search.
        prefix: The beginning of the word, e.g. "th".
        limit: Maximum number of words to return. Zero or less returns nothing.

    Returns:
        Matching words ordered by count descending, ties broken
        alphabetically, at most `limit` long.
    """
    candidates = [
        Candidate(word, count)
        for word, count in index.items()
        if word.startswith(prefix)
    ]
    logger.debug(f"# of matches for '{prefix}': {len(candidates)}")

    if limit <= 0:
        return []

    candidates.sort(key=_rank_key)
    return [candidate.word for candidate in candidates[:limit]]
