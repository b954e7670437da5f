"""
Error handling module for listing search.

Provides the storage error type and the guard used at the store boundary.
"""

from .error_handler import StorageError, StorageErrorHandler

__all__ = ['StorageError', 'StorageErrorHandler']
