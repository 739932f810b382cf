"""Per-type wiring for the eight media kinds of the catalog."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel
from sqlmodel import SQLModel

from .catalogs import BookGenre, ContributorKind, MusicGenre, VideoGameGenre, VideoGenre
from .models import (
    AlbumRecord,
    AnimeRecord,
    BookRecord,
    CartoonRecord,
    ComicRecord,
    MovieRecord,
    SeriesRecord,
    VideoGameRecord,
)
from .natural_keys import key_token, media_natural_key
from .schemas import (
    AlbumModel,
    AnimeModel,
    BookModel,
    CartoonModel,
    ComicModel,
    MovieModel,
    SeriesModel,
    VideoGameModel,
)


@dataclass(frozen=True, slots=True)
class MediaKindSpec:
    """Everything the shared reconciler needs to know about one media type."""

    media_type: str
    label: str
    path: str
    schema: type[BaseModel]
    record: type[SQLModel]
    key_fields: tuple[str, ...]
    associations: Mapping[str, ContributorKind] = field(default_factory=dict)
    genres: type[Enum] | None = None

    def natural_key(self, media: Any) -> tuple[Any, ...]:
        return media_natural_key(self.key_fields, media)

    def key_token(self, media: Any) -> str:
        return key_token(self.natural_key(media))

    @property
    def has_season_key(self) -> bool:
        """Series-like kinds are addressed by title and current season."""

        return self.key_fields == ("title", "current_season")


_VIDEO_CREW = {
    "producers": ContributorKind.PRODUCER,
    "directors": ContributorKind.DIRECTOR,
}

MOVIE = MediaKindSpec(
    media_type="movie",
    label="Movie",
    path="movies",
    schema=MovieModel,
    record=MovieRecord,
    key_fields=("title", "runtime", "release_date"),
    associations={"main_actors": ContributorKind.ACTOR, **_VIDEO_CREW},
    genres=VideoGenre,
)

SERIES = MediaKindSpec(
    media_type="series",
    label="Series",
    path="series",
    schema=SeriesModel,
    record=SeriesRecord,
    key_fields=("title", "current_season"),
    associations={"main_actors": ContributorKind.ACTOR, **_VIDEO_CREW},
    genres=VideoGenre,
)

ANIME = MediaKindSpec(
    media_type="anime",
    label="Anime",
    path="animes",
    schema=AnimeModel,
    record=AnimeRecord,
    key_fields=("title", "current_season"),
    associations=dict(_VIDEO_CREW),
    genres=VideoGenre,
)

CARTOON = MediaKindSpec(
    media_type="cartoon",
    label="Cartoon",
    path="cartoons",
    schema=CartoonModel,
    record=CartoonRecord,
    key_fields=("title", "runtime", "release_date"),
    associations=dict(_VIDEO_CREW),
    genres=VideoGenre,
)

BOOK = MediaKindSpec(
    media_type="book",
    label="Book",
    path="books",
    schema=BookModel,
    record=BookRecord,
    key_fields=("title", "release_date"),
    associations={
        "authors": ContributorKind.AUTHOR,
        "publishers": ContributorKind.PUBLISHER,
    },
    genres=BookGenre,
)

COMIC = MediaKindSpec(
    media_type="comic",
    label="Comic",
    path="comics",
    schema=ComicModel,
    record=ComicRecord,
    key_fields=("title", "release_date"),
    associations={
        "authors": ContributorKind.AUTHOR,
        "publishers": ContributorKind.PUBLISHER,
        "illustrators": ContributorKind.ILLUSTRATOR,
    },
    genres=BookGenre,
)

ALBUM = MediaKindSpec(
    media_type="album",
    label="Album",
    path="albums",
    schema=AlbumModel,
    record=AlbumRecord,
    key_fields=("title", "track_count", "length"),
    associations={
        "label_records": ContributorKind.LABEL_RECORDS,
        "singers": ContributorKind.SINGER,
    },
    genres=MusicGenre,
)

VIDEO_GAME = MediaKindSpec(
    media_type="video_game",
    label="Video game",
    path="video-games",
    schema=VideoGameModel,
    record=VideoGameRecord,
    key_fields=("title", "release_date"),
    associations={
        "developers": ContributorKind.DEVELOPER,
        "publishers": ContributorKind.PUBLISHER,
    },
    genres=VideoGameGenre,
)

MEDIA_KINDS: dict[str, MediaKindSpec] = {
    spec.media_type: spec
    for spec in (MOVIE, SERIES, ANIME, CARTOON, BOOK, COMIC, ALBUM, VIDEO_GAME)
}
