"""Error types raised by the catalog stores and services."""
from __future__ import annotations

from typing import Any


class CatalogError(RuntimeError):
    """Base class for every catalog failure surfaced to callers."""


class DuplicateMediaError(CatalogError):
    """Raised when a media record with the same natural key already exists."""

    def __init__(self, existing: Any) -> None:
        self.existing = existing
        super().__init__(
            f"{existing.media_type} {existing.title!r} already exists with id {existing.id}"
        )


class MediaNotFoundError(CatalogError):
    """Raised when no media record matches the requested identifier."""

    def __init__(self, media_type: str, media_id: int) -> None:
        self.media_type = media_type
        self.media_id = media_id
        super().__init__(f"{media_type} with id {media_id} not found")


class StoreFailureError(CatalogError):
    """Raised when the relational store rejects or fails an operation."""


class UniqueKeyViolation(StoreFailureError):
    """Raised when a write collides with a natural-key uniqueness constraint."""
