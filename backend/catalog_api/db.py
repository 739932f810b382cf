"""Database helpers for the catalog API."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from . import models  # noqa: F401  - registers tables on SQLModel.metadata
from .errors import StoreFailureError, UniqueKeyViolation
from .settings import CatalogSettings
from .utils.paths import ensure_parent_directory

logger = logging.getLogger(__name__)


def _ensure_sqlite_path(database_url: str) -> None:
    """Create parent directories when using a file-backed SQLite URL."""

    if database_url.startswith("sqlite:///"):
        path_part = database_url.removeprefix("sqlite:///").split("?")[0]
        if path_part and path_part != ":memory:":
            ensure_parent_directory(path_part)


def create_engine_from_settings(settings: CatalogSettings) -> Engine:
    """Create a SQLModel engine using catalog settings."""

    _ensure_sqlite_path(settings.database_url)
    connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
    return create_engine(settings.database_url, echo=settings.database_echo, connect_args=connect_args)


def init_database(engine: Engine) -> None:
    """Create every catalog table that does not exist yet."""

    SQLModel.metadata.create_all(engine)


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    """Yield a SQLModel session that commits on success and rolls back on error."""

    session = Session(engine)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def ping(engine: Engine) -> bool:
    """Check whether the database answers a trivial query."""

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database ping failed: %s", exc)
        return False
    return True


@contextmanager
def translate_store_errors(action: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as catalog store errors."""

    try:
        yield
    except IntegrityError as exc:
        raise UniqueKeyViolation(f"Unable to {action}: uniqueness constraint violated") from exc
    except SQLAlchemyError as exc:
        logger.error("Unable to %s: %s", action, exc)
        raise StoreFailureError(f"Unable to {action}") from exc
