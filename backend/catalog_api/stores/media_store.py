"""Media store persisting the eight media tables and their contributor links."""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Sequence

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, select

from ..db import session_scope, translate_store_errors
from ..errors import MediaNotFoundError
from ..media_kinds import MEDIA_KINDS, MediaKindSpec
from ..models import ContributorRecord, MediaContributorLink
from ..natural_keys import normalize_key_value
from ..schemas import ContributorModel
from .contributor_store import contributor_to_model


@dataclass(slots=True)
class MediaStore:
    """CRUD access to media records of every kind.

    Reads return fully populated schema models, including the contributors
    attached through ``media_contributor_links``. Writes touch the media row
    and its link rows inside a single transaction.
    """

    engine: Engine

    def find_by_natural_key(self, spec: MediaKindSpec, key: str) -> BaseModel | None:
        """Return the record of ``spec`` whose normalized natural key equals ``key``."""

        statement = select(spec.record).where(spec.record.natural_key == key)
        with translate_store_errors(f"look up {spec.media_type}"), Session(self.engine) as session:
            record = session.exec(statement).first()
            return _to_models(session, spec, [record])[0] if record else None

    def get(self, spec: MediaKindSpec, media_id: int) -> BaseModel | None:
        """Fetch a single record by identifier."""

        with translate_store_errors(f"fetch {spec.media_type}"), Session(self.engine) as session:
            record = session.get(spec.record, media_id)
            return _to_models(session, spec, [record])[0] if record else None

    def save(self, spec: MediaKindSpec, media: BaseModel) -> BaseModel:
        """Insert ``media`` when it has no identifier, fully replace it otherwise.

        Every contributor referenced by an association field must already be
        persisted. Replacing a record rewrites all of its scalar columns and
        association links; omitted associations end up empty.
        """

        payload = _record_payload(spec, media)
        links = _link_targets(spec, media)
        with translate_store_errors(f"save {spec.media_type}"), session_scope(self.engine) as session:
            if media.id is None:
                record = spec.record.model_validate(payload)
            else:
                record = session.get(spec.record, media.id)
                if record is None:
                    raise MediaNotFoundError(spec.media_type, media.id)
                validated = spec.record.model_validate(payload)
                for key in payload:
                    setattr(record, key, getattr(validated, key))
                record.updated_at = datetime.utcnow()
                for link in _existing_links(session, spec, record.id):
                    session.delete(link)

            session.add(record)
            session.flush()
            session.add_all(
                MediaContributorLink(
                    media_type=spec.media_type,
                    media_id=record.id,
                    role=role,
                    contributor_id=contributor_id,
                )
                for role, contributor_id in links
            )
            session.flush()
            return _to_models(session, spec, [record])[0]

    def delete(self, spec: MediaKindSpec, media_id: int) -> BaseModel | None:
        """Remove a record and its links, returning the removed value."""

        with translate_store_errors(f"delete {spec.media_type}"), session_scope(self.engine) as session:
            record = session.get(spec.record, media_id)
            if record is None:
                return None
            removed = _to_models(session, spec, [record])[0]
            for link in _existing_links(session, spec, media_id):
                session.delete(link)
            session.delete(record)
            return removed

    def list_all(self, spec: MediaKindSpec) -> list[BaseModel]:
        """Return every record of ``spec`` ordered by title."""

        statement = select(spec.record).order_by(func.lower(spec.record.title), spec.record.id)
        with translate_store_errors(f"list {spec.media_type}"), Session(self.engine) as session:
            records = session.exec(statement).all()
            return _to_models(session, spec, records)

    def search_by_title(self, spec: MediaKindSpec, title: str) -> list[BaseModel]:
        """Return records whose title contains ``title``, compared case-folded."""

        statement = (
            select(spec.record)
            .where(spec.record.title_key.contains(normalize_key_value(title), autoescape=True))
            .order_by(func.lower(spec.record.title), spec.record.id)
        )
        with translate_store_errors(f"search {spec.media_type}"), Session(self.engine) as session:
            records = session.exec(statement).all()
            return _to_models(session, spec, records)

    def counts(self) -> dict[str, int]:
        """Return the number of records per media type."""

        counts: dict[str, int] = {}
        with translate_store_errors("count media"), Session(self.engine) as session:
            for media_type, spec in MEDIA_KINDS.items():
                counts[media_type] = session.exec(
                    select(func.count()).select_from(spec.record)
                ).one()
        return counts


def _record_payload(spec: MediaKindSpec, media: BaseModel) -> dict[str, Any]:
    """Extract the scalar columns of ``media`` plus its search and natural-key tokens."""

    payload = media.model_dump(mode="json", exclude={"id", "media_type", *spec.associations})
    payload["title_key"] = normalize_key_value(media.title)
    payload["natural_key"] = spec.key_token(media)
    return payload


def _link_targets(spec: MediaKindSpec, media: BaseModel) -> list[tuple[str, int]]:
    targets: list[tuple[str, int]] = []
    for role in spec.associations:
        seen: set[int] = set()
        for contributor in getattr(media, role):
            if not contributor.id:
                raise ValueError(f"{role} entry {contributor!r} has not been persisted")
            if contributor.id not in seen:
                seen.add(contributor.id)
                targets.append((role, contributor.id))
    return targets


def _existing_links(session: Session, spec: MediaKindSpec, media_id: int) -> Sequence[MediaContributorLink]:
    statement = (
        select(MediaContributorLink)
        .where(MediaContributorLink.media_type == spec.media_type)
        .where(MediaContributorLink.media_id == media_id)
    )
    return session.exec(statement).all()


def _to_models(session: Session, spec: MediaKindSpec, records: Iterable[SQLModel]) -> list[BaseModel]:
    """Convert media records into schema models with their associations loaded."""

    records = list(records)
    if not records:
        return []

    statement = (
        select(MediaContributorLink.media_id, MediaContributorLink.role, ContributorRecord)
        .join(ContributorRecord, ContributorRecord.id == MediaContributorLink.contributor_id)
        .where(MediaContributorLink.media_type == spec.media_type)
        .where(MediaContributorLink.media_id.in_([record.id for record in records]))
        .order_by(ContributorRecord.id)
    )
    associations: dict[int, dict[str, list[ContributorModel]]] = defaultdict(lambda: defaultdict(list))
    for media_id, role, contributor in session.exec(statement):
        associations[media_id][role].append(contributor_to_model(contributor))

    models = []
    for record in records:
        data = record.model_dump()
        data.update({role: associations[record.id][role] for role in spec.associations})
        models.append(spec.schema.model_validate(data))
    return models
