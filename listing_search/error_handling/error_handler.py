"""
Error handling at the persistence boundary.

Storage faults must never reach a search result: reads fall back to a
default and a failed write puts the store into in-memory-only mode for the
rest of the process.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Optional


# Configure logging
logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised by storage backends when a read or write cannot complete.

    Attributes:
        key: Storage key involved in the failed operation
    """

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class StorageErrorHandler:
    """
    Guards store reads and writes against persistence faults.

    Attributes:
        store_name: Name of the store, used in log messages
        degraded: True once a write has failed; later writes are skipped
    """

    def __init__(self, store_name: str):
        """
        Initialize the handler for one store.

        Args:
            store_name: Name of the store, used in log messages
        """
        self.store_name = store_name
        self.degraded = False

    def guarded_read(
        self,
        operation: Callable[[], Any],
        key: str,
        default: Any = None
    ) -> Any:
        """
        Run a read, returning ``default`` if it fails.

        Both storage faults and payloads that do not validate against the
        model are treated as "nothing stored".

        Args:
            operation: Callable performing the read and decoding
            key: Storage key being read
            default: Value returned on failure

        Returns:
            Result of the read, or ``default``
        """
        try:
            return operation()
        except Exception as e:
            self._log_error(operation_name="read", key=key, error=e)
            return default

    def guarded_write(
        self,
        operation: Callable[[], None],
        key: str
    ) -> bool:
        """
        Run a write unless the store is already degraded.

        On failure the store switches to in-memory-only mode for the rest
        of the process.

        Args:
            operation: Callable performing the write
            key: Storage key being written

        Returns:
            True if the write went through, False otherwise
        """
        if self.degraded:
            logger.debug(f"{self.store_name}: skipping write of '{key}', persistence disabled")
            return False

        try:
            operation()
            return True
        except Exception as e:
            self._log_error(operation_name="write", key=key, error=e)
            self.degraded = True
            logger.warning(
                f"{self.store_name}: persistence disabled, continuing in memory only"
            )
            return False

    def _log_error(
        self,
        operation_name: str,
        key: str,
        error: Exception
    ) -> None:
        """
        Log error with timestamp, context, and diagnostic data.

        Args:
            operation_name: Name of the operation that failed
            key: Storage key involved
            error: The exception that occurred
        """
        context = {
            'timestamp': datetime.now().isoformat(),
            'store': self.store_name,
            'operation': operation_name,
            'key': key,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }

        logger.error(
            f"Storage {operation_name} failed: {self.store_name} | "
            f"Key: {key} | "
            f"Error: {type(error).__name__}: {str(error)}"
        )
        logger.debug(f"Full error context: {context}")
