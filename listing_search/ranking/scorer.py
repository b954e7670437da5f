"""
Relevance scoring for free-text queries.

Combines per-field fuzzy scores with fixed field weights into one score per
listing, and ranks a candidate set by that score.
"""

import logging
from typing import Dict, List, Optional, Tuple

from listing_search.config import FuzzyConfig
from listing_search.matching import fuzzy_score
from listing_search.models import Listing

logger = logging.getLogger(__name__)

# Title weighted higher than the other fields
FIELD_WEIGHTS: Dict[str, float] = {
    'title': 2.0,
    'description': 1.0,
    'category': 1.5,
    'subcategory': 1.5,
    'location': 1.0,
}


def score_listing(
    query: str,
    listing: Listing,
    config: Optional[FuzzyConfig] = None
) -> float:
    """Score a listing against a query.

    Args:
        query: Free-text query
        listing: Listing to score
        config: Fuzzy matching configuration

    Returns:
        Weighted sum of the field scores; 0 means nothing matched
    """
    return sum(
        fuzzy_score(query, getattr(listing, field), config) * weight
        for field, weight in FIELD_WEIGHTS.items()
    )


def score_listings(
    query: str,
    listings: List[Listing],
    config: Optional[FuzzyConfig] = None
) -> List[Tuple[Listing, float]]:
    """Pair each listing with its score, dropping listings that score 0."""
    scored = []
    for listing in listings:
        score = score_listing(query, listing, config)
        if score > 0:
            scored.append((listing, score))
    return scored


def rank_by_relevance(
    query: str,
    listings: List[Listing],
    config: Optional[FuzzyConfig] = None
) -> List[Listing]:
    """Rank listings by descending relevance.

    Listings that match nothing are excluded. The sort is stable, so equal
    scores keep their input order.

    Args:
        query: Free-text query
        listings: Candidate listings in catalog order
        config: Fuzzy matching configuration

    Returns:
        Matching listings, best first
    """
    scored = score_listings(query, listings, config)
    scored.sort(key=lambda pair: pair[1], reverse=True)

    logger.debug(f"Relevance: {len(scored)}/{len(listings)} listings matched '{query}'")

    return [listing for listing, _ in scored]
