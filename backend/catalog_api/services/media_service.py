"""Per-type façades over the shared media reconciler."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from ..catalogs import catalog_values
from ..media_kinds import MEDIA_KINDS, MediaKindSpec
from .reconciler import MediaReconciler


class MediaService:
    """Bind one :class:`MediaKindSpec` to the shared :class:`MediaReconciler`."""

    def __init__(self, spec: MediaKindSpec, reconciler: MediaReconciler) -> None:
        self.spec = spec
        self._reconciler = reconciler

    def create(self, media: BaseModel | dict[str, Any]) -> BaseModel:
        return self._reconciler.create(self.spec, self._coerce(media))

    def update(self, media_id: int, media: BaseModel | dict[str, Any]) -> BaseModel:
        return self._reconciler.update(self.spec, media_id, self._coerce(media))

    def delete(self, media_id: int) -> BaseModel:
        return self._reconciler.delete(self.spec, media_id)

    def get_by_id(self, media_id: int) -> BaseModel:
        return self._reconciler.get(self.spec, media_id)

    def get_by_title(self, title: str) -> list[BaseModel]:
        return self._reconciler.search_by_title(self.spec, title)

    def get_by_title_and_season(self, title: str, current_season: int) -> BaseModel | None:
        return self._reconciler.find_by_natural_key(self.spec, (title, current_season))

    def list_all(self) -> list[BaseModel]:
        return self._reconciler.list_all(self.spec)

    def genres(self) -> list[str]:
        return catalog_values(self.spec.genres) if self.spec.genres else []

    def _coerce(self, media: BaseModel | dict[str, Any]) -> BaseModel:
        if type(media) is self.spec.schema:
            return media
        if isinstance(media, BaseModel):
            media = media.model_dump()
        return self.spec.schema.model_validate(media)


def build_media_services(reconciler: MediaReconciler) -> dict[str, MediaService]:
    """Instantiate one façade per registered media kind."""

    return {media_type: MediaService(spec, reconciler) for media_type, spec in MEDIA_KINDS.items()}
