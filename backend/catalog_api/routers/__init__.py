"""Router exports for the catalog API."""
from . import catalogs, contributors, health, media, metrics

__all__ = ["catalogs", "contributors", "health", "media", "metrics"]
