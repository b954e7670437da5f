"""Tests for the search engine facade."""

import pytest
from datetime import datetime

from listing_search import SearchEngine, SearchFilters
from listing_search.config import SearchSettings, PaginationConfig
from listing_search.memory import InMemoryStorage, SEARCH_HISTORY_KEY
from listing_search.models import Listing, SortOption


def _listing(listing_id, **overrides):
    data = {
        "id": listing_id,
        "title": f"Listing {listing_id}",
        "category": "crops",
        "price": 10.0,
        "created_at": datetime(2024, 1, 1),
    }
    data.update(overrides)
    return Listing(**data)


@pytest.fixture
def catalog():
    return [
        _listing("tomatoes", title="Fresh Tomatoes", category="crops", price=2,
                 location="Harare, Mashonaland"),
        _listing("maize", title="Maize Seed", category="crops", price=5,
                 location="Bulawayo, Matabeleland"),
    ]


@pytest.fixture
def engine():
    return SearchEngine(storage=InMemoryStorage(), settings=SearchSettings())


class FailingStorage:
    def get(self, key):
        return None

    def set(self, key, value):
        raise OSError("quota exceeded")


def test_query_returns_only_matching_listing(engine, catalog):
    result = engine.search(catalog, SearchFilters(query="tomato"))

    assert [l.id for l in result.items] == ["tomatoes"]
    assert result.total == 1
    assert result.total_pages == 1
    assert result.query == "tomato"
    assert result.suggestions == ["Fresh Tomatoes"]


def test_category_filter_sorted_by_price(engine, catalog):
    filters = SearchFilters(category="crops", sort_by=SortOption.PRICE_ASC)

    result = engine.search(catalog, filters)

    assert [l.id for l in result.items] == ["tomatoes", "maize"]
    assert result.total == 2
    assert result.suggestions == []


def test_nonexistent_query_returns_empty(engine, catalog):
    result = engine.search(catalog, SearchFilters(query="xyz-nonexistent"))

    assert result.items == []
    assert result.total == 0
    assert result.total_pages == 0
    assert result.suggestions == []


def test_no_query_keeps_catalog_order(engine, catalog):
    result = engine.search(list(reversed(catalog)))

    assert [l.id for l in result.items] == ["maize", "tomatoes"]
    assert engine.get_history() == []


def test_empty_catalog(engine):
    result = engine.search([], SearchFilters(query="tomato"))

    assert result.items == []
    assert result.total == 0
    assert result.facets.categories == []
    assert result.facets.price_ranges == []


def test_facets_reflect_relevance_filtered_set(engine, catalog):
    result = engine.search(catalog, SearchFilters(query="tomato", limit=1, page=3))

    assert result.items == []
    assert [(f.name, f.count) for f in result.facets.categories] == [("crops", 1)]
    assert [(f.name, f.count) for f in result.facets.locations] == [("Harare", 1)]
    assert [(r.min, r.max, r.count) for r in result.facets.price_ranges] == [(2, 2, 1)] * 4


def test_suggestions_come_from_unfiltered_catalog(engine, catalog):
    result = engine.search(catalog, SearchFilters(query="tomato", category="livestock"))

    assert result.items == []
    assert result.suggestions == ["Fresh Tomatoes"]


def test_explicit_sort_overrides_relevance(engine):
    catalog = [
        _listing("a", title="Tomato", price=9),
        _listing("b", title="Cherry tomatoes", price=1),
    ]

    relevance = engine.search(catalog, SearchFilters(query="tomato"))
    by_price = engine.search(catalog, SearchFilters(query="tomato", sort_by="price-asc"))

    assert [l.id for l in relevance.items] == ["a", "b"]
    assert [l.id for l in by_price.items] == ["b", "a"]


def test_query_is_trimmed_and_recorded(engine, catalog):
    engine.search(catalog, SearchFilters(query="  tomato  "))
    engine.search(catalog, SearchFilters(query="tomato"))

    history = engine.get_history()
    assert [h.query for h in history] == ["tomato"]
    assert history[0].result_count == 1


def test_blank_query_is_not_recorded(engine, catalog):
    result = engine.search(catalog, SearchFilters(query="   "))

    assert result.total == 2
    assert engine.get_history() == []


def test_history_management(engine, catalog):
    engine.search(catalog, SearchFilters(query="tomato"))
    engine.search(catalog, SearchFilters(query="maize"))

    engine.remove_from_history("tomato")
    assert [h.query for h in engine.get_history()] == ["maize"]

    engine.clear_history()
    assert engine.get_history() == []


def test_get_suggestions_prepends_history(engine, catalog):
    engine.search(catalog, SearchFilters(query="tomato"))

    assert engine.get_suggestions("tom", catalog) == ["tomato", "Fresh Tomatoes"]
    assert engine.get_suggestions("t", catalog) == []


def test_saved_search_lifecycle(engine, catalog):
    saved = engine.save_search("Crops by price", SearchFilters(category="crops", sort_by="price-desc"))

    assert engine.get_saved_searches() == [saved]

    updated = engine.update_saved_search(saved.id, {"notify_on_new": True})
    assert updated.notify_on_new is True
    assert updated.name == "Crops by price"

    result = engine.run_saved_search(saved.id, catalog)
    assert [l.id for l in result.items] == ["maize", "tomatoes"]

    engine.delete_saved_search(saved.id)
    assert engine.get_saved_searches() == []
    assert engine.run_saved_search(saved.id, catalog) is None


def test_engines_do_not_share_state(catalog):
    first = SearchEngine(storage=InMemoryStorage(), settings=SearchSettings())
    second = SearchEngine(storage=InMemoryStorage(), settings=SearchSettings())

    first.search(catalog, SearchFilters(query="tomato"))

    assert len(first.get_history()) == 1
    assert second.get_history() == []


def test_history_survives_engine_restart(catalog):
    storage = InMemoryStorage()
    SearchEngine(storage=storage, settings=SearchSettings()).search(
        catalog, SearchFilters(query="tomato")
    )

    restarted = SearchEngine(storage=storage, settings=SearchSettings())

    assert [h.query for h in restarted.get_history()] == ["tomato"]
    assert storage.get(SEARCH_HISTORY_KEY)[0]["query"] == "tomato"


def test_storage_failure_does_not_break_search(catalog):
    engine = SearchEngine(storage=FailingStorage(), settings=SearchSettings())

    result = engine.search(catalog, SearchFilters(query="tomato"))
    saved = engine.save_search("Tomatoes", SearchFilters(query="tomato"))

    assert result.total == 1
    assert [h.query for h in engine.get_history()] == ["tomato"]
    assert engine.get_saved_searches() == [saved]


def test_non_positive_limit_uses_configured_default(catalog):
    settings = SearchSettings(pagination=PaginationConfig(default_limit=1))
    engine = SearchEngine(storage=InMemoryStorage(), settings=settings)

    result = engine.search(catalog, SearchFilters(limit=0))

    assert len(result.items) == 1
    assert result.total_pages == 2
    assert result.has_more is True


def test_inverted_price_range_yields_no_results(engine, catalog):
    result = engine.search(catalog, SearchFilters(min_price=5, max_price=2))

    assert result.items == []
    assert result.total == 0
