"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class RecordError(Exception):
    """Base exception for record-related errors."""
    pass


class RecordNotFoundError(RecordError):
    """Raised when no record matches a key."""

    def __init__(self, key: Any, record_type: Optional[str] = None):
        self.key = key
        self.record_type = record_type or "Record"
        super().__init__(f"{self.record_type} with key {key!r} not found")
