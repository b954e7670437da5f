"""
Search history persistence.

Keeps a bounded, newest-first log of past queries, deduplicated by query
text, and writes it back in full after every change.
"""

import logging
import threading
from datetime import datetime
from typing import List

from listing_search.error_handling import StorageErrorHandler
from listing_search.models import SearchFilters, SearchHistoryItem
from .storage import KeyValueStorage, SEARCH_HISTORY_KEY

logger = logging.getLogger(__name__)


class SearchHistoryStore:
    """Bounded log of past searches.

    The log is loaded once from storage on construction. A storage fault
    never propagates: the store keeps working in memory.
    """

    def __init__(self, storage: KeyValueStorage, max_entries: int = 50):
        """Initialize the store and load any persisted history.

        Args:
            storage: Key-value persistence backend
            max_entries: Maximum number of entries kept
        """
        self.storage = storage
        self.max_entries = max_entries
        self.error_handler = StorageErrorHandler("search_history")
        self._lock = threading.Lock()
        self._entries: List[SearchHistoryItem] = self.error_handler.guarded_read(
            self._load, SEARCH_HISTORY_KEY, default=[]
        )

    def _load(self) -> List[SearchHistoryItem]:
        raw = self.storage.get(SEARCH_HISTORY_KEY)
        if not raw:
            return []
        entries = [SearchHistoryItem.model_validate(entry) for entry in raw]
        logger.debug(f"Loaded {len(entries)} history entries")
        return entries[:self.max_entries]

    def _persist(self) -> None:
        payload = [entry.model_dump(mode="json") for entry in self._entries]
        self.error_handler.guarded_write(
            lambda: self.storage.set(SEARCH_HISTORY_KEY, payload),
            SEARCH_HISTORY_KEY
        )

    def items(self) -> List[SearchHistoryItem]:
        """Return history entries, newest first."""
        with self._lock:
            return list(self._entries)

    def add(
        self,
        query: str,
        filters: SearchFilters,
        result_count: int
    ) -> SearchHistoryItem:
        """Record a search at the front of the history.

        An existing entry with the same query text (exact, case-sensitive)
        is replaced. The log is then truncated to ``max_entries``.

        Args:
            query: Query text as searched
            filters: Filters used for the search
            result_count: Number of matches found

        Returns:
            The new history entry
        """
        entry = SearchHistoryItem(
            query=query,
            filters=filters,
            timestamp=datetime.now(),
            result_count=result_count
        )

        with self._lock:
            self._entries = [e for e in self._entries if e.query != query]
            self._entries.insert(0, entry)
            del self._entries[self.max_entries:]
            self._persist()

        return entry

    def remove(self, query: str) -> None:
        """Remove the entry for ``query`` if present."""
        with self._lock:
            self._entries = [e for e in self._entries if e.query != query]
            self._persist()

    def clear(self) -> None:
        with self._lock:
            self._entries = []
            self._persist()
