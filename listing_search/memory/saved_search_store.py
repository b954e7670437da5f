"""
Saved search persistence.

Saved searches are user-named filter sets. They are not capped in number
and are written back in full after every change.
"""

import logging
import threading
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from listing_search.error_handling import StorageErrorHandler
from listing_search.models import SavedSearch, SearchFilters
from .storage import KeyValueStorage, SAVED_SEARCHES_KEY

logger = logging.getLogger(__name__)

# Fields an update may never overwrite
_IMMUTABLE_FIELDS = ('id', 'created_at')


class SavedSearchStore:
    """Named, persisted filter sets."""

    def __init__(self, storage: KeyValueStorage):
        """Initialize the store and load any persisted saved searches.

        Args:
            storage: Key-value persistence backend
        """
        self.storage = storage
        self.error_handler = StorageErrorHandler("saved_searches")
        self._lock = threading.Lock()
        self._searches: List[SavedSearch] = self.error_handler.guarded_read(
            self._load, SAVED_SEARCHES_KEY, default=[]
        )

    def _load(self) -> List[SavedSearch]:
        raw = self.storage.get(SAVED_SEARCHES_KEY)
        if not raw:
            return []
        return [SavedSearch.model_validate(entry) for entry in raw]

    def _persist(self) -> None:
        payload = [search.model_dump(mode="json") for search in self._searches]
        self.error_handler.guarded_write(
            lambda: self.storage.set(SAVED_SEARCHES_KEY, payload),
            SAVED_SEARCHES_KEY
        )

    def get_all(self) -> List[SavedSearch]:
        """Return saved searches in creation order."""
        with self._lock:
            return list(self._searches)

    def get(self, search_id: str) -> Optional[SavedSearch]:
        with self._lock:
            return next((s for s in self._searches if s.id == search_id), None)

    def save(
        self,
        name: str,
        filters: SearchFilters,
        notify_on_new: bool = False
    ) -> SavedSearch:
        """Save a filter set under a name.

        Args:
            name: Display name chosen by the user
            filters: Filters to keep
            notify_on_new: Whether the user wants new-listing notifications

        Returns:
            The saved search with its generated id
        """
        saved = SavedSearch(
            id=f"saved-{uuid.uuid4().hex}",
            name=name,
            filters=filters,
            created_at=datetime.now(),
            notify_on_new=notify_on_new
        )

        with self._lock:
            self._searches.append(saved)
            self._persist()

        logger.debug(f"Saved search '{name}' as {saved.id}")
        return saved

    def delete(self, search_id: str) -> None:
        with self._lock:
            self._searches = [s for s in self._searches if s.id != search_id]
            self._persist()

    def update(self, search_id: str, updates: Dict[str, Any]) -> Optional[SavedSearch]:
        """Merge ``updates`` into a saved search.

        Fields not named in ``updates`` keep their values; ``id`` and
        ``created_at`` are never changed.

        Args:
            search_id: Id of the saved search
            updates: Partial field values

        Returns:
            The updated saved search, or None if the id is unknown
        """
        changes = {k: v for k, v in updates.items() if k not in _IMMUTABLE_FIELDS}

        with self._lock:
            for index, search in enumerate(self._searches):
                if search.id == search_id:
                    merged = SavedSearch.model_validate({**search.model_dump(), **changes})
                    self._searches[index] = merged
                    self._persist()
                    return merged

        logger.debug(f"Saved search {search_id} not found, nothing updated")
        return None
