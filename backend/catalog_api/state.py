"""Shared state container for the catalog API."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import Engine

from .db import create_engine_from_settings, init_database
from .services import ContributorResolver, MediaReconciler, MediaService, build_media_services
from .settings import CatalogSettings
from .stores import ContributorStore, MediaStore


@dataclass(slots=True)
class AppState:
    """Encapsulates the engine, stores and services shared across routers."""

    settings: CatalogSettings
    engine: Engine
    contributor_store: ContributorStore
    media_store: MediaStore
    reconciler: MediaReconciler
    media_services: dict[str, MediaService]

    def __init__(self, settings: CatalogSettings) -> None:
        self.settings = settings
        self.engine = create_engine_from_settings(settings)
        init_database(self.engine)
        self.contributor_store = ContributorStore(self.engine)
        self.media_store = MediaStore(self.engine)
        self.reconciler = MediaReconciler(self.media_store, ContributorResolver(self.contributor_store))
        self.media_services = build_media_services(self.reconciler)
