"""Contributor store over the shared ``contributors`` table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from ..catalogs import ContributorKind
from ..db import session_scope, translate_store_errors
from ..models import ContributorRecord
from ..natural_keys import contributor_token
from ..schemas import CompanyModel, ContributorModel, PersonModel


@dataclass(slots=True)
class ContributorStore:
    """Lookup and insert access to persisted contributors of every kind."""

    engine: Engine

    def find_by_natural_key(self, kind: ContributorKind, key: str) -> ContributorModel | None:
        """Return the contributor of ``kind`` whose normalized key equals ``key``."""

        statement = (
            select(ContributorRecord)
            .where(ContributorRecord.kind == kind.value)
            .where(ContributorRecord.natural_key == key)
        )
        with translate_store_errors(f"look up {kind.value}"), Session(self.engine) as session:
            record = session.exec(statement).first()
            return contributor_to_model(record) if record else None

    def get(self, kind: ContributorKind, contributor_id: int) -> ContributorModel | None:
        with translate_store_errors(f"fetch {kind.value}"), Session(self.engine) as session:
            record = session.get(ContributorRecord, contributor_id)
            if record is None or record.kind != kind.value:
                return None
            return contributor_to_model(record)

    def save(self, kind: ContributorKind, contributor: ContributorModel) -> ContributorModel:
        """Insert a loose contributor and return it with its assigned identifier.

        Contributors are never updated in place, so any identifier carried by
        the payload is ignored. A natural-key collision raises
        ``UniqueKeyViolation``.
        """

        record = ContributorRecord(kind=kind.value, natural_key=contributor_token(kind, contributor))
        if kind.is_person:
            record.first_name = contributor.first_name
            record.last_name = contributor.last_name
        else:
            record.name = contributor.name

        with translate_store_errors(f"save {kind.value}"), session_scope(self.engine) as session:
            session.add(record)
            session.flush()
            return contributor_to_model(record)

    def list_all(self, kind: ContributorKind) -> list[ContributorModel]:
        """Return every contributor of ``kind`` ordered by name."""

        if kind.is_person:
            order_by = (
                func.lower(ContributorRecord.last_name),
                func.lower(ContributorRecord.first_name),
                ContributorRecord.id,
            )
        else:
            order_by = (func.lower(ContributorRecord.name), ContributorRecord.id)
        statement = select(ContributorRecord).where(ContributorRecord.kind == kind.value).order_by(*order_by)
        with translate_store_errors(f"list {kind.value}"), Session(self.engine) as session:
            records: Iterable[ContributorRecord] = session.exec(statement)
            return [contributor_to_model(record) for record in records]

    def counts(self) -> dict[str, int]:
        """Return the number of contributors per kind."""

        statement = (
            select(ContributorRecord.kind, func.count())
            .group_by(ContributorRecord.kind)
            .order_by(ContributorRecord.kind)
        )
        with translate_store_errors("count contributors"), Session(self.engine) as session:
            rows = session.exec(statement).all()
        return {kind: count for kind, count in rows}


def contributor_to_model(record: ContributorRecord) -> ContributorModel:
    """Convert a contributor record into its person or company model."""

    if ContributorKind(record.kind).is_person:
        return PersonModel(id=record.id, first_name=record.first_name, last_name=record.last_name)
    return CompanyModel(id=record.id, name=record.name)
