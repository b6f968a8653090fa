"""
Error taxonomy for the record store.

Every failure that crosses the store boundary is one of these. Raw sqlite3
errors are translated in database.py before they reach a caller.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for all record store failures."""


class ValidationError(StoreError):
    """Input has the wrong shape or is out of range, or a duplicate exists."""


class NotFoundError(StoreError):
    """A referenced record does not exist."""

    def __init__(self, resource: str = "Resource"):
        self.resource = resource
        super().__init__(f"{resource} not found")


class DecodeError(StoreError):
    """Stored ciphertext could not be reversed into plaintext."""


class StorageError(StoreError):
    """The underlying database failed for a reason the caller cannot fix."""
