"""
Autocomplete suggestions.

Suggestions come from listing fields containing the typed text and from
recent queries in the search history.
"""

from typing import Iterable, List

from listing_search.models import Listing, SearchHistoryItem


def _dedupe(values: Iterable[str], limit: int) -> List[str]:
    """Keep the first occurrence of each value, up to ``limit`` values."""
    seen = set()
    unique = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        unique.append(value)
        if len(unique) >= limit:
            break
    return unique


def _listing_candidates(query_lower: str, listings: List[Listing]):
    for listing in listings:
        if query_lower in listing.title.lower():
            yield listing.title
        if query_lower in listing.category.lower():
            yield listing.category
        if query_lower in listing.subcategory.lower():
            yield listing.subcategory
        if query_lower in listing.location.lower():
            yield listing.city


def generate_suggestions(
    query: str,
    listings: List[Listing],
    max_suggestions: int = 8,
    min_query_length: int = 2
) -> List[str]:
    """Generate suggestions from listings matching a partial query.

    Listings are scanned in catalog order; for each one a matching title
    comes before its category, subcategory and city.

    Args:
        query: Text typed so far
        listings: Catalog listings
        max_suggestions: Maximum number of suggestions
        min_query_length: Shortest query that produces suggestions

    Returns:
        Distinct suggestions in first-match order
    """
    if not query or len(query) < min_query_length:
        return []

    return _dedupe(_listing_candidates(query.lower(), listings), max_suggestions)


def history_suggestions(
    query: str,
    history: List[SearchHistoryItem],
    limit: int = 3
) -> List[str]:
    """Most recent past queries containing ``query`` (case-insensitive)."""
    query_lower = query.lower()
    matches = [entry.query for entry in history if query_lower in entry.query.lower()]
    return matches[:limit]


def combine_suggestions(
    query: str,
    history: List[SearchHistoryItem],
    listings: List[Listing],
    history_limit: int = 3,
    max_suggestions: int = 8,
    min_query_length: int = 2
) -> List[str]:
    """History suggestions first, then listing suggestions, deduplicated.

    Args:
        query: Text typed so far
        history: Search history, newest first
        listings: Catalog listings
        history_limit: Maximum number of history-derived suggestions
        max_suggestions: Maximum number of suggestions overall
        min_query_length: Shortest query that produces suggestions

    Returns:
        Combined suggestions
    """
    if not query or len(query) < min_query_length:
        return []

    from_history = history_suggestions(query, history, history_limit)
    from_listings = generate_suggestions(query, listings, max_suggestions, min_query_length)

    return _dedupe(from_history + from_listings, max_suggestions)
