"""Resolution of loose contributors to persisted rows."""
from __future__ import annotations

import logging
from typing import Iterable, Protocol

from ..catalogs import ContributorKind
from ..errors import StoreFailureError, UniqueKeyViolation
from ..natural_keys import contributor_token
from ..schemas import ContributorModel

logger = logging.getLogger(__name__)


class ContributorRepository(Protocol):
    """Subset of the contributor store the resolver depends on."""

    def find_by_natural_key(self, kind: ContributorKind, key: str) -> ContributorModel | None: ...

    def save(self, kind: ContributorKind, contributor: ContributorModel) -> ContributorModel: ...


class ContributorResolver:
    """Map loose contributor payloads onto persisted contributors.

    A contributor whose natural key is already stored is reused as stored and
    the incoming payload is discarded; otherwise the payload is inserted.
    Resolving the same keys twice never inserts twice.
    """

    def __init__(self, store: ContributorRepository) -> None:
        self._store = store

    def resolve(
        self, kind: ContributorKind, loose: Iterable[ContributorModel]
    ) -> list[ContributorModel]:
        """Return one persisted contributor per distinct natural key in ``loose``."""

        resolved: dict[str, ContributorModel] = {}
        for contributor in loose:
            key = contributor_token(kind, contributor)
            if key not in resolved:
                resolved[key] = self._resolve_one(kind, contributor, key)
        return list(resolved.values())

    def _resolve_one(
        self, kind: ContributorKind, contributor: ContributorModel, key: str
    ) -> ContributorModel:
        existing = self._store.find_by_natural_key(kind, key)
        if existing is not None:
            logger.info("Reusing %s %s already present in the store", kind.value, existing)
            return existing

        try:
            created = self._store.save(kind, contributor)
        except UniqueKeyViolation:
            # Another writer inserted the same key between lookup and insert.
            existing = self._store.find_by_natural_key(kind, key)
            if existing is None:
                raise StoreFailureError(f"Unable to resolve {kind.value} {key}") from None
            logger.info("Reusing %s %s inserted concurrently", kind.value, existing)
            return existing

        logger.info("Created %s %s", kind.value, created)
        return created
