"""
Persistence for search history and saved searches.
"""

from .storage import (
    KeyValueStorage,
    InMemoryStorage,
    JsonFileStorage,
    RedisStorage,
    create_storage,
    SEARCH_HISTORY_KEY,
    SAVED_SEARCHES_KEY,
)
from .history_store import SearchHistoryStore
from .saved_search_store import SavedSearchStore

__all__ = [
    'KeyValueStorage',
    'InMemoryStorage',
    'JsonFileStorage',
    'RedisStorage',
    'create_storage',
    'SEARCH_HISTORY_KEY',
    'SAVED_SEARCHES_KEY',
    'SearchHistoryStore',
    'SavedSearchStore',
]
