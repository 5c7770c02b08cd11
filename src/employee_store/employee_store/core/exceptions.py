from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for employee store failures."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(DomainError):
    """Raised when a required field is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when the referenced employee does not exist."""


class ConflictError(DomainError):
    """Raised on a unique-key violation (duplicate employee name)."""


class StorageError(DomainError):
    """Raised when the storage engine fails (connectivity, locks, overflow)."""
