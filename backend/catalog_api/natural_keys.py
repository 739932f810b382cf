"""Natural-key extraction and normalization.

Media records and contributors are deduplicated on business keys rather than
on their store identifiers. A key is extracted as a tuple of field values and
stored as a normalized token so that lookups and the database uniqueness
constraints agree on what counts as "the same" record:

* strings are stripped and case-folded, so title and name matching is
  case-insensitive;
* dates are rendered as ISO-8601;
* enum members collapse to their value;
* ``None`` stays ``null``.
"""
from __future__ import annotations

import json
from datetime import date
from enum import Enum
from typing import Any, Iterable, Sequence

from .catalogs import ContributorKind


def normalize_key_value(value: Any) -> Any:
    """Return the comparison form of a single natural-key component."""

    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value.strip().casefold()
    if isinstance(value, date):
        return value.isoformat()
    return value


def key_token(values: Iterable[Any]) -> str:
    """Encode a natural key as the token stored in ``natural_key`` columns."""

    normalized = [normalize_key_value(value) for value in values]
    return json.dumps(normalized, ensure_ascii=False, separators=(",", ":"))


def media_natural_key(key_fields: Sequence[str], media: Any) -> tuple[Any, ...]:
    """Extract the natural-key fields of a media payload."""

    return tuple(getattr(media, field) for field in key_fields)


def contributor_natural_key(kind: ContributorKind, contributor: Any) -> tuple[Any, ...]:
    """People key on ``(first_name, last_name)``, companies on ``(name,)``."""

    if kind.is_person:
        return (contributor.first_name, contributor.last_name)
    return (contributor.name,)


def contributor_token(kind: ContributorKind, contributor: Any) -> str:
    return key_token(contributor_natural_key(kind, contributor))
