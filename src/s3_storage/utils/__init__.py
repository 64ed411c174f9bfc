"""Utility functions for the S3 storage library."""

from .context import get_context_dict, get_correlation_id, with_correlation_id
from .errors import (
    StorageException,
    sanitize_dict,
    sanitize_error_message,
    sanitize_exception,
)

__all__ = [
    "StorageException",
    "sanitize_dict",
    "sanitize_error_message",
    "sanitize_exception",
    "get_context_dict",
    "get_correlation_id",
    "with_correlation_id",
]
