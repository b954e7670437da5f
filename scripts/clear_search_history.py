#!/usr/bin/env python3
"""Clear persisted search history, and optionally saved searches."""

import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from listing_search.config import get_search_settings
from listing_search.memory import (
    create_storage,
    SEARCH_HISTORY_KEY,
    SAVED_SEARCHES_KEY,
)
from listing_search.error_handling import StorageError


def clear_search_data(include_saved: bool = False):
    settings = get_search_settings()

    try:
        storage = create_storage(settings.storage)

        storage.set(SEARCH_HISTORY_KEY, [])
        print(f'Cleared {SEARCH_HISTORY_KEY} ({settings.storage.storage_type} storage)')

        if include_saved:
            storage.set(SAVED_SEARCHES_KEY, [])
            print(f'Cleared {SAVED_SEARCHES_KEY} ({settings.storage.storage_type} storage)')

        print('Search data cleared successfully!')

    except (StorageError, ValueError) as e:
        print(f'Error: {e}')
        sys.exit(1)

if __name__ == '__main__':
    clear_search_data(include_saved='--all' in sys.argv[1:])
