"""
Search engine facade.

Runs one search end to end: filter, score, facet, sort, paginate, suggest,
then record the query in the search history.
"""

import logging
from typing import Any, Dict, List, Optional

from listing_search.config import SearchSettings, get_search_settings
from listing_search.facets import compute_facets
from listing_search.filtering import ListingFilter
from listing_search.memory import (
    KeyValueStorage,
    SavedSearchStore,
    SearchHistoryStore,
    create_storage,
)
from listing_search.models import (
    Listing,
    SavedSearch,
    SearchFilters,
    SearchHistoryItem,
    SearchResult,
)
from listing_search.ranking import paginate, rank_by_relevance, sort_listings
from listing_search.suggestions import combine_suggestions, generate_suggestions

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Fuzzy, faceted search over an in-memory catalog.

    Each engine owns its own history and saved-search stores, backed by the
    injected storage, so separate instances never share state.

    Example:
        engine = SearchEngine(storage=InMemoryStorage())
        result = engine.search(listings, SearchFilters(query="tomato"))
    """

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        settings: Optional[SearchSettings] = None
    ):
        """
        Initialize the engine.

        Args:
            storage: Persistence backend; built from settings when omitted
            settings: Engine settings; read from the environment when omitted
        """
        self.settings = settings or get_search_settings()
        self.storage = storage if storage is not None else create_storage(self.settings.storage)
        self.listing_filter = ListingFilter()
        self.history = SearchHistoryStore(
            self.storage,
            max_entries=self.settings.history.max_entries
        )
        self.saved_searches = SavedSearchStore(self.storage)

    def search(
        self,
        listings: List[Listing],
        filters: Optional[SearchFilters] = None
    ) -> SearchResult:
        """
        Search listings with fuzzy matching and filters.

        Listings are expected in a deterministic order: it is kept when no
        query or sort is given, and breaks ties everywhere else.

        Args:
            listings: Catalog listings
            filters: Search parameters

        Returns:
            One page of results with facets and suggestions
        """
        filters = filters or SearchFilters()
        query = (filters.query or "").strip()

        results = self.listing_filter.apply(listings, filters)

        if query:
            results = rank_by_relevance(query, results, self.settings.fuzzy)

        facets = compute_facets(results)
        results = sort_listings(results, filters.sort_by)

        page = paginate(
            results,
            page=filters.page,
            limit=filters.limit,
            default_limit=self.settings.pagination.default_limit
        )

        suggestions = []
        if query:
            suggestions = generate_suggestions(
                query,
                listings,
                max_suggestions=self.settings.suggestions.max_suggestions,
                min_query_length=self.settings.suggestions.min_query_length
            )

        result = SearchResult(
            items=page.items,
            total=page.total,
            page=page.page,
            total_pages=page.total_pages,
            query=query,
            filters=filters,
            suggestions=suggestions,
            facets=facets
        )

        logger.debug(
            f"Search '{query}' matched {page.total} of {len(listings)} listings "
            f"(page {page.page}/{page.total_pages})"
        )

        if query:
            self.history.add(query, filters, page.total)

        return result

    def get_suggestions(self, query: str, listings: List[Listing]) -> List[str]:
        """
        Get search suggestions as the user types.

        Recent matching queries come first, then listing-derived ones.
        """
        return combine_suggestions(
            query,
            self.history.items(),
            listings,
            history_limit=self.settings.history.suggestion_count,
            max_suggestions=self.settings.suggestions.max_suggestions,
            min_query_length=self.settings.suggestions.min_query_length
        )

    def get_history(self) -> List[SearchHistoryItem]:
        return self.history.items()

    def clear_history(self) -> None:
        self.history.clear()

    def remove_from_history(self, query: str) -> None:
        self.history.remove(query)

    def save_search(
        self,
        name: str,
        filters: SearchFilters,
        notify_on_new: bool = False
    ) -> SavedSearch:
        return self.saved_searches.save(name, filters, notify_on_new)

    def get_saved_searches(self) -> List[SavedSearch]:
        return self.saved_searches.get_all()

    def delete_saved_search(self, search_id: str) -> None:
        self.saved_searches.delete(search_id)

    def update_saved_search(
        self,
        search_id: str,
        updates: Dict[str, Any]
    ) -> Optional[SavedSearch]:
        return self.saved_searches.update(search_id, updates)

    def run_saved_search(
        self,
        search_id: str,
        listings: List[Listing]
    ) -> Optional[SearchResult]:
        """
        Re-run a saved search against the current catalog.

        Args:
            search_id: Id of the saved search
            listings: Catalog listings

        Returns:
            Search result, or None if the saved search does not exist
        """
        saved = self.saved_searches.get(search_id)
        if saved is None:
            logger.warning(f"Saved search {search_id} not found")
            return None

        return self.search(listings, saved.filters.with_page(1))
