"""Filesystem helpers for catalog storage paths."""
from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir


APP_NAME = "MediaLibrary"
APP_AUTHOR = "MediaLibrary"


def default_database_path() -> str:
    """Return the platform-appropriate default SQLite database location."""

    base_dir = Path(user_data_dir(APP_NAME, APP_AUTHOR))
    return str(base_dir / "catalog.db")


def default_database_url() -> str:
    """Return a SQLite URL pointing at the default database location."""

    return f"sqlite:///{default_database_path()}"


def ensure_parent_directory(path: str) -> str:
    """Expand a file path and create its parent directory if missing."""

    resolved = Path(path).expanduser()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    return str(resolved)
