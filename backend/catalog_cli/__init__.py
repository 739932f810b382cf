"""Command line client for the media library catalog API."""
from .app import app

__all__ = ["app"]
