"""
Key-value persistence for search history and saved searches.

The engine only needs ``get(key)`` and ``set(key, value)`` over JSON-ready
values. Three backends are provided: in-process memory, JSON files on disk
and Redis. Every backend namespaces keys with a prefix and reports faults
as ``StorageError``.
"""

import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

import redis

from listing_search.config import StorageConfig
from listing_search.error_handling import StorageError

logger = logging.getLogger(__name__)

# Well-known storage keys
SEARCH_HISTORY_KEY = "search_history"
SAVED_SEARCHES_KEY = "saved_searches"


class KeyValueStorage(Protocol):
    """Protocol for the persistence collaborator."""

    def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when nothing is stored."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-ready value, replacing any previous one."""
        ...


class InMemoryStorage:
    """Dict-backed storage, lost when the process exits."""

    def __init__(self, key_prefix: str = ""):
        self.key_prefix = key_prefix
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(self.key_prefix + key)
        return json.loads(raw) if raw is not None else None

    def set(self, key: str, value: Any) -> None:
        # Values are held as JSON text
        try:
            self._data[self.key_prefix + key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Value for '{key}' is not JSON serializable: {e}", key=key)


class JsonFileStorage:
    """Stores each key as a JSON file under a base directory.

    Values are wrapped in an envelope ``{"value", "created_at", "expiry"}``.
    An entry past its expiry reads as absent and its file is removed.
    """

    def __init__(self, base_dir: str = "./search_data", key_prefix: str = ""):
        self.base_dir = Path(base_dir)
        self.key_prefix = key_prefix

    def _path(self, key: str) -> Path:
        return self.base_dir / f"{self.key_prefix}{key}.json"

    def get(self, key: str) -> Optional[Any]:
        """Read a value from disk.

        Args:
            key: Storage key

        Returns:
            Stored value, or None when missing or expired

        Raises:
            StorageError: If the file exists but cannot be read or decoded
        """
        path = self._path(key)
        if not path.exists():
            return None

        try:
            envelope = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read '{path}': {e}", key=key)

        expiry = envelope.get("expiry")
        if expiry is not None and time.time() > expiry:
            logger.debug(f"Entry '{key}' expired, removing {path}")
            path.unlink(missing_ok=True)
            return None

        return envelope.get("value")

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        """Write a value to disk, replacing the file atomically.

        Args:
            key: Storage key
            value: JSON-ready value
            ttl_seconds: Optional lifetime of the entry

        Raises:
            StorageError: If the value cannot be encoded or written
        """
        now = time.time()
        envelope = {
            "value": value,
            "created_at": now,
            "expiry": now + ttl_seconds if ttl_seconds else None,
        }
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")

        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(envelope), encoding="utf-8")
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Failed to write '{path}': {e}", key=key)


class RedisStorage:
    """Stores JSON-encoded values in Redis."""

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "",
        client: Optional[redis.Redis] = None
    ):
        """
        Args:
            redis_url: Connection URL, used when no client is given
            key_prefix: Prefix applied to every key
            client: Existing Redis client to reuse
        """
        self.key_prefix = key_prefix
        self.client = client or redis.from_url(redis_url, decode_responses=True)

    def get(self, key: str) -> Optional[Any]:
        try:
            raw = self.client.get(self.key_prefix + key)
        except redis.RedisError as e:
            raise StorageError(f"Redis read of '{key}' failed: {e}", key=key)

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except ValueError as e:
            raise StorageError(f"Redis value for '{key}' is not valid JSON: {e}", key=key)

    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        try:
            payload = json.dumps(value)
            if ttl_seconds:
                self.client.setex(self.key_prefix + key, ttl_seconds, payload)
            else:
                self.client.set(self.key_prefix + key, payload)
        except (redis.RedisError, TypeError, ValueError) as e:
            raise StorageError(f"Redis write of '{key}' failed: {e}", key=key)


def create_storage(config: Optional[StorageConfig] = None) -> KeyValueStorage:
    """Build the storage backend named by ``config.storage_type``.

    Args:
        config: Storage configuration

    Returns:
        Storage backend

    Raises:
        ValueError: If the storage type is unknown
    """
    config = config or StorageConfig()
    storage_type = config.storage_type.lower()

    if storage_type == "memory":
        return InMemoryStorage(key_prefix=config.key_prefix)

    if storage_type == "file":
        logger.info(f"Using file storage in {config.base_dir}")
        return JsonFileStorage(base_dir=config.base_dir, key_prefix=config.key_prefix)

    if storage_type == "redis":
        logger.info(f"Using Redis storage at {config.redis_url}")
        return RedisStorage(redis_url=config.redis_url, key_prefix=config.key_prefix)

    raise ValueError(f"Unknown storage type: {config.storage_type}")
