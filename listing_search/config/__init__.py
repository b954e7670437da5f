"""Configuration module for Listing Search."""

from .search_config import (
    SEARCH_CONFIG,
    SearchSettings,
    FuzzyConfig,
    PaginationConfig,
    HistoryConfig,
    SuggestionConfig,
    StorageConfig,
    get_search_settings,
)

__all__ = [
    'SEARCH_CONFIG',
    'SearchSettings',
    'FuzzyConfig',
    'PaginationConfig',
    'HistoryConfig',
    'SuggestionConfig',
    'StorageConfig',
    'get_search_settings',
]
