"""Create, update and delete media records with contributor deduplication."""
from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

from pydantic import BaseModel

from ..errors import DuplicateMediaError, MediaNotFoundError, UniqueKeyViolation
from ..media_kinds import MediaKindSpec
from ..natural_keys import key_token
from .resolver import ContributorResolver

logger = logging.getLogger(__name__)


class MediaRepository(Protocol):
    """Subset of the media store the reconciler depends on."""

    def find_by_natural_key(self, spec: MediaKindSpec, key: str) -> BaseModel | None: ...

    def get(self, spec: MediaKindSpec, media_id: int) -> BaseModel | None: ...

    def save(self, spec: MediaKindSpec, media: BaseModel) -> BaseModel: ...

    def delete(self, spec: MediaKindSpec, media_id: int) -> BaseModel | None: ...

    def list_all(self, spec: MediaKindSpec) -> list[BaseModel]: ...

    def search_by_title(self, spec: MediaKindSpec, title: str) -> list[BaseModel]: ...


class MediaReconciler:
    """Shared reconciliation logic behind every media type.

    Incoming records carry loose contributors in their association fields.
    Before anything is written, each association field is resolved through
    the :class:`ContributorResolver` so that the stored record only ever
    references persisted contributors. Duplicate detection relies on the
    natural key declared by the record's :class:`MediaKindSpec`.
    """

    def __init__(self, media_store: MediaRepository, resolver: ContributorResolver) -> None:
        self._media_store = media_store
        self._resolver = resolver

    def create(self, spec: MediaKindSpec, media: BaseModel) -> BaseModel:
        """Persist a new record, raising ``DuplicateMediaError`` on a natural-key match."""

        key = spec.key_token(media)
        existing = self._media_store.find_by_natural_key(spec, key)
        if existing is not None:
            logger.warning("Unable to create %s %r: natural key %s already stored", spec.media_type, media.title, key)
            raise DuplicateMediaError(existing)

        candidate = self._resolve_associations(spec, media).model_copy(update={"id": None})
        try:
            created = self._media_store.save(spec, candidate)
        except UniqueKeyViolation:
            existing = self._media_store.find_by_natural_key(spec, key)
            if existing is None:
                raise
            logger.warning("Unable to create %s %r: inserted concurrently", spec.media_type, media.title)
            raise DuplicateMediaError(existing) from None

        logger.info("Created %s %r with id %s", spec.media_type, created.title, created.id)
        return created

    def update(self, spec: MediaKindSpec, media_id: int, media: BaseModel) -> BaseModel:
        """Fully replace the record ``media_id`` with ``media``.

        Every field of the stored record is overwritten, including
        association fields omitted from the payload, which become empty.
        """

        current = self._media_store.get(spec, media_id)
        if current is None:
            logger.warning("Unable to update %s %s: not found", spec.media_type, media_id)
            raise MediaNotFoundError(spec.media_type, media_id)

        replacement = self._resolve_associations(spec, media).model_copy(update={"id": current.id})
        try:
            updated = self._media_store.save(spec, replacement)
        except UniqueKeyViolation:
            conflicting = self._media_store.find_by_natural_key(spec, spec.key_token(media))
            if conflicting is None or conflicting.id == current.id:
                raise
            logger.warning(
                "Unable to update %s %s: natural key held by id %s",
                spec.media_type,
                media_id,
                conflicting.id,
            )
            raise DuplicateMediaError(conflicting) from None

        logger.info("Updated %s %s", spec.media_type, media_id)
        return updated

    def delete(self, spec: MediaKindSpec, media_id: int) -> BaseModel:
        """Remove a record and return it; contributors are left untouched."""

        removed = self._media_store.delete(spec, media_id)
        if removed is None:
            logger.warning("Unable to delete %s %s: not found", spec.media_type, media_id)
            raise MediaNotFoundError(spec.media_type, media_id)
        logger.info("Deleted %s %s", spec.media_type, media_id)
        return removed

    def get(self, spec: MediaKindSpec, media_id: int) -> BaseModel:
        media = self._media_store.get(spec, media_id)
        if media is None:
            raise MediaNotFoundError(spec.media_type, media_id)
        return media

    def find_by_natural_key(self, spec: MediaKindSpec, values: Sequence[Any]) -> BaseModel | None:
        """Return the stored record whose natural key equals ``values``."""

        return self._media_store.find_by_natural_key(spec, key_token(values))

    def list_all(self, spec: MediaKindSpec) -> list[BaseModel]:
        return self._media_store.list_all(spec)

    def search_by_title(self, spec: MediaKindSpec, title: str) -> list[BaseModel]:
        return self._media_store.search_by_title(spec, title)

    def _resolve_associations(self, spec: MediaKindSpec, media: BaseModel) -> BaseModel:
        """Return a copy of ``media`` whose associations reference persisted contributors."""

        resolved = {
            role: self._resolver.resolve(kind, getattr(media, role))
            for role, kind in spec.associations.items()
        }
        return media.model_copy(update=resolved)
