"""
Listing Search - fuzzy, faceted search over a marketplace catalog.
"""

from listing_search.engine import SearchEngine
from listing_search.models import (
    Listing,
    ListingStatus,
    SortOption,
    SearchFilters,
    SearchResult,
    SearchFacets,
    SearchHistoryItem,
    SavedSearch,
)

__version__ = "0.1.0"

__all__ = [
    'SearchEngine',
    'Listing',
    'ListingStatus',
    'SortOption',
    'SearchFilters',
    'SearchResult',
    'SearchFacets',
    'SearchHistoryItem',
    'SavedSearch',
]
