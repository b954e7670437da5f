"""Search engine configuration settings for Listing Search."""

from dataclasses import dataclass
import os

from dotenv import load_dotenv

load_dotenv()


@dataclass
class FuzzyConfig:
    """Fuzzy matching configuration."""
    threshold: float = 0.4
    distance: int = 100
    ignore_case: bool = True
    ignore_accents: bool = True


@dataclass
class PaginationConfig:
    """Paging configuration."""
    default_limit: int = 12


@dataclass
class HistoryConfig:
    """Search history configuration."""
    max_entries: int = 50
    suggestion_count: int = 3


@dataclass
class SuggestionConfig:
    """Autocomplete suggestion configuration."""
    min_query_length: int = 2
    max_suggestions: int = 8


@dataclass
class StorageConfig:
    """Persistence configuration."""
    storage_type: str = "memory"
    base_dir: str = "./search_data"
    key_prefix: str = "listing_search_"
    redis_url: str = "redis://localhost:6379"


@dataclass
class SearchSettings:
    """Main search engine configuration settings."""
    fuzzy: FuzzyConfig = None
    pagination: PaginationConfig = None
    history: HistoryConfig = None
    suggestions: SuggestionConfig = None
    storage: StorageConfig = None

    def __post_init__(self):
        """Initialize nested configs if not provided."""
        if self.fuzzy is None:
            self.fuzzy = FuzzyConfig()
        if self.pagination is None:
            self.pagination = PaginationConfig()
        if self.history is None:
            self.history = HistoryConfig()
        if self.suggestions is None:
            self.suggestions = SuggestionConfig()
        if self.storage is None:
            self.storage = StorageConfig()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Default search configuration
SEARCH_CONFIG = {
    "fuzzy": {
        "threshold": float(os.getenv("FUZZY_THRESHOLD", "0.4")),
        "distance": int(os.getenv("FUZZY_DISTANCE", "100")),
        "ignore_case": _env_flag("FUZZY_IGNORE_CASE", "true"),
        "ignore_accents": _env_flag("FUZZY_IGNORE_ACCENTS", "true"),
    },
    "pagination": {
        "default_limit": int(os.getenv("SEARCH_DEFAULT_LIMIT", "12")),
    },
    "history": {
        "max_entries": int(os.getenv("HISTORY_MAX_ENTRIES", "50")),
        "suggestion_count": int(os.getenv("HISTORY_SUGGESTION_COUNT", "3")),
    },
    "suggestions": {
        "min_query_length": int(os.getenv("SUGGESTION_MIN_QUERY_LENGTH", "2")),
        "max_suggestions": int(os.getenv("SUGGESTION_MAX_RESULTS", "8")),
    },
    "storage": {
        "storage_type": os.getenv("STORAGE_TYPE", "memory"),
        "base_dir": os.getenv("SEARCH_DATA_DIR", "./search_data"),
        "key_prefix": os.getenv("STORAGE_KEY_PREFIX", "listing_search_"),
        "redis_url": os.getenv("REDIS_URL", "redis://localhost:6379"),
    },
}


def get_search_settings() -> SearchSettings:
    """Get search settings from configuration."""
    return SearchSettings(
        fuzzy=FuzzyConfig(**SEARCH_CONFIG["fuzzy"]),
        pagination=PaginationConfig(**SEARCH_CONFIG["pagination"]),
        history=HistoryConfig(**SEARCH_CONFIG["history"]),
        suggestions=SuggestionConfig(**SEARCH_CONFIG["suggestions"]),
        storage=StorageConfig(**SEARCH_CONFIG["storage"]),
    )
