"""
Approximate string matching.

Provides Levenshtein edit distance and the normalized fuzzy score used to
rank listings against a free-text query.
"""

from typing import Optional

from rapidfuzz.distance import Levenshtein

from listing_search.config import FuzzyConfig
from .normalizer import normalize

EXACT_MATCH_SCORE = 1.0
SUBSTRING_SCORE = 0.9
WORD_PREFIX_SCORE = 0.8

_DEFAULT_CONFIG = FuzzyConfig()


def edit_distance(a: str, b: str) -> int:
    """Calculate the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning ``a`` into ``b``
    """
    return Levenshtein.distance(a, b)


def fuzzy_score(
    query: str,
    text: str,
    config: Optional[FuzzyConfig] = None
) -> float:
    """Calculate a fuzzy match score between a query and a candidate text.

    Both strings are normalized first. In priority order the score is:
    1.0 on exact equality, 0.9 when the text contains the query, 0.8 when a
    word of the text starts with the query, otherwise
    ``1 - distance / max_len`` if that reaches ``config.threshold``, else 0.

    Args:
        query: Search query
        text: Candidate field value
        config: Fuzzy configuration, defaults to ``FuzzyConfig()``

    Returns:
        Score in [0, 1], higher is a better match
    """
    if not query or not text:
        return 0.0

    config = config or _DEFAULT_CONFIG
    q = normalize(query, config)
    t = normalize(text, config)

    if t == q:
        return EXACT_MATCH_SCORE

    if q in t:
        return SUBSTRING_SCORE

    if any(word.startswith(q) for word in t.split()):
        return WORD_PREFIX_SCORE

    max_len = max(len(q), len(t))

    # The length difference is a lower bound on the edit distance
    if 1 - abs(len(q) - len(t)) / max_len < config.threshold:
        return 0.0

    score = 1 - edit_distance(q, t) / max_len
    return score if score >= config.threshold else 0.0
