"""
Result ordering and pagination.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from listing_search.models import Listing, SortOption


@dataclass
class Page:
    """A slice of an ordered result set.

    Attributes:
        items: Listings on this page
        total: Number of listings across all pages
        page: 1-based page number actually served
        total_pages: Number of pages for the resolved limit
    """
    items: List[Listing]
    total: int
    page: int
    total_pages: int


def sort_listings(
    listings: List[Listing],
    sort_by: Optional[SortOption] = None
) -> List[Listing]:
    """Order listings by an explicit sort key.

    ``relevance``, ``distance`` and ``None`` keep the incoming order, which
    is either the relevance ranking or the catalog order. All sorts are
    stable, so ties keep their incoming order.

    Args:
        listings: Listings to order
        sort_by: Requested ordering

    Returns:
        A new, ordered list
    """
    if sort_by == SortOption.PRICE_ASC:
        return sorted(listings, key=lambda listing: listing.price)

    if sort_by == SortOption.PRICE_DESC:
        return sorted(listings, key=lambda listing: listing.price, reverse=True)

    if sort_by == SortOption.NEWEST:
        return sorted(listings, key=lambda listing: listing.created_at, reverse=True)

    if sort_by == SortOption.RATING:
        return sorted(listings, key=lambda listing: listing.seller_rating, reverse=True)

    return list(listings)


def paginate(
    listings: List[Listing],
    page: int = 1,
    limit: int = 12,
    default_limit: int = 12
) -> Page:
    """Slice one page out of an ordered result set.

    A non-positive ``limit`` falls back to ``default_limit`` and a page
    below 1 is served as page 1. A page past the end yields no items while
    ``total`` and ``total_pages`` still describe the full set.

    Args:
        listings: Ordered listings
        page: Requested 1-based page
        limit: Requested page size
        default_limit: Page size used when ``limit`` is not positive

    Returns:
        Page of results
    """
    if limit <= 0:
        limit = default_limit
    page = max(page, 1)

    total = len(listings)
    total_pages = math.ceil(total / limit)
    start = (page - 1) * limit

    return Page(
        items=listings[start:start + limit],
        total=total,
        page=page,
        total_pages=total_pages,
    )
