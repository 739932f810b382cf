"""Database-backed stores for catalog entities."""

from .contributor_store import ContributorStore
from .media_store import MediaStore

__all__ = ["ContributorStore", "MediaStore"]
