"""
Facet aggregation over search results.

Facets summarise the filtered, pre-pagination result set so a UI can offer
further narrowing: counts per category, per city, and per price quartile.
"""

import math
from collections import Counter
from typing import Iterable, List

from listing_search.models import FacetCount, Listing, PriceRange, SearchFacets

PRICE_BUCKETS = 4


def _ranked_counts(values: Iterable[str]) -> List[FacetCount]:
    """Tally values, most frequent first; ties keep first-seen order."""
    counts = Counter(values)
    ranked = sorted(counts.items(), key=lambda entry: entry[1], reverse=True)
    return [FacetCount(name=name, count=count) for name, count in ranked]


def compute_price_ranges(prices: List[float]) -> List[PriceRange]:
    """Split the observed price span into four equal-width buckets.

    Bucket ``i`` covers ``[floor(min + step*i), ceil(min + step*(i+1))]``
    inclusive on both ends. With a fractional step adjacent buckets can
    share a boundary, and a price on that boundary is counted in both.

    Args:
        prices: Prices of the result set

    Returns:
        Four buckets, or an empty list when there are no prices
    """
    if not prices:
        return []

    low = min(prices)
    high = max(prices)
    step = (high - low) / PRICE_BUCKETS

    ranges = []
    for i in range(PRICE_BUCKETS):
        bucket_min = math.floor(low + step * i)
        bucket_max = math.ceil(low + step * (i + 1))
        count = sum(1 for price in prices if bucket_min <= price <= bucket_max)
        ranges.append(PriceRange(min=bucket_min, max=bucket_max, count=count))

    return ranges


def compute_facets(listings: List[Listing]) -> SearchFacets:
    """Compute category, city and price facets for a result set.

    Args:
        listings: Filtered listings before pagination

    Returns:
        SearchFacets for the set; all lists empty when the set is empty
    """
    return SearchFacets(
        categories=_ranked_counts(listing.category for listing in listings),
        locations=_ranked_counts(listing.city for listing in listings),
        price_ranges=compute_price_ranges([listing.price for listing in listings]),
    )
