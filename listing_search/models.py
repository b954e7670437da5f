"""
Data models for Listing Search.

This module defines the core data structures used throughout the engine:
the catalog listing it reads, the filters describing a query, and the
result, facet, history and saved-search records it produces.
"""

from pydantic import BaseModel, ConfigDict, Field
from enum import Enum
from typing import List, Optional
from datetime import datetime


class ListingStatus(str, Enum):
    """Lifecycle state of a marketplace listing"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    SOLD = "sold"
    PENDING = "pending"


class SortOption(str, Enum):
    """Result orderings accepted by the engine"""
    RELEVANCE = "relevance"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NEWEST = "newest"
    RATING = "rating"
    DISTANCE = "distance"


class Listing(BaseModel):
    """Represents a marketplace listing.

    Listings are owned by the catalog; the engine only reads them.

    Attributes:
        id: Unique listing identifier within one catalog
        title: Listing title
        description: Free-text description
        category: Top-level category
        subcategory: Category refinement
        location: Free-text location, by convention "City, Region"
        price: Non-negative, finite unit price
        created_at: When the listing was published
        seller_verified: Whether the seller passed verification
        featured: Whether the listing is promoted
        status: Lifecycle state
        seller_rating: Average seller rating
    """
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    category: str
    subcategory: str = ""
    location: str = ""
    price: float = Field(ge=0, allow_inf_nan=False)
    created_at: datetime
    seller_verified: bool = False
    featured: bool = False
    status: ListingStatus = ListingStatus.ACTIVE
    seller_rating: float = 0.0

    seller_id: Optional[str] = None
    seller_name: Optional[str] = None
    unit: Optional[str] = None
    quantity: Optional[float] = None
    tags: List[str] = Field(default_factory=list)
    distance: Optional[float] = None

    @property
    def city(self) -> str:
        """First comma-delimited segment of the location, trimmed."""
        return self.location.split(',')[0].strip()


class SearchFilters(BaseModel):
    """Parameters describing one search.

    Filters are immutable: the ``with_*`` helpers return a new instance.
    Any field left as ``None`` imposes no constraint.
    """
    model_config = ConfigDict(frozen=True)

    query: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    location: Optional[str] = None
    radius: Optional[float] = None  # km
    verified: Optional[bool] = None
    featured: Optional[bool] = None
    status: Optional[ListingStatus] = None
    sort_by: Optional[SortOption] = None
    page: int = 1
    limit: int = 12

    @property
    def has_filters(self) -> bool:
        """True when anything other than paging is set."""
        data = self.model_dump(exclude={'page', 'limit'})
        return any(value is not None for value in data.values())

    def with_query(self, query: str) -> 'SearchFilters':
        """Return filters for a new query, back on the first page."""
        return self.model_copy(update={'query': query, 'page': 1})

    def with_filter(self, **changes) -> 'SearchFilters':
        """Return filters with ``changes`` applied, back on the first page."""
        changes['page'] = 1
        return self.model_validate({**self.model_dump(), **changes})

    def with_page(self, page: int) -> 'SearchFilters':
        return self.model_copy(update={'page': page})

    def cleared(self) -> 'SearchFilters':
        """Return empty filters that keep the current page size."""
        return SearchFilters(limit=self.limit)


class FacetCount(BaseModel):
    """Number of matching listings sharing one field value"""
    name: str
    count: int


class PriceRange(BaseModel):
    """Inclusive price bucket and the listings falling in it"""
    min: int
    max: int
    count: int


class SearchFacets(BaseModel):
    """Aggregates over the filtered, pre-pagination result set"""
    categories: List[FacetCount] = Field(default_factory=list)
    locations: List[FacetCount] = Field(default_factory=list)
    price_ranges: List[PriceRange] = Field(default_factory=list)


class SearchResult(BaseModel):
    """One page of search results with metadata"""
    items: List[Listing]
    total: int
    page: int
    total_pages: int
    query: str
    filters: SearchFilters
    suggestions: List[str] = Field(default_factory=list)
    facets: SearchFacets = Field(default_factory=SearchFacets)

    @property
    def has_results(self) -> bool:
        return len(self.items) > 0

    @property
    def has_more(self) -> bool:
        return self.page < self.total_pages


class SearchHistoryItem(BaseModel):
    """A past query as recorded after a search"""
    query: str
    filters: SearchFilters
    timestamp: datetime = Field(default_factory=datetime.now)
    result_count: int


class SavedSearch(BaseModel):
    """A named filter set the user asked to keep"""
    id: str
    name: str
    filters: SearchFilters
    created_at: datetime = Field(default_factory=datetime.now)
    notify_on_new: bool = False
