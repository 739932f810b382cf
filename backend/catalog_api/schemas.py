"""Pydantic models exposed by the catalog API."""
from __future__ import annotations

from datetime import date
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .catalogs import (
    BookFormat,
    BookGenre,
    MediaSupport,
    MusicGenre,
    VideoGameGenre,
    VideoGamePlatform,
    VideoGenre,
)


class PersonModel(BaseModel):
    """A person contributor (actor, director, author, singer, ...)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: int | None = Field(
        default=None, description="Store identifier; unset or 0 for a contributor not yet persisted."
    )
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)


class CompanyModel(BaseModel):
    """A company contributor (developer, publisher, label records)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: int | None = Field(
        default=None, description="Store identifier; unset or 0 for a contributor not yet persisted."
    )
    name: str = Field(..., min_length=1)


ContributorModel = Union[PersonModel, CompanyModel]


class MediaHeader(BaseModel):
    """Descriptive fields shared by every media type."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: int | None = Field(default=None, description="Store-assigned identifier.")
    title: str = Field(..., min_length=1)
    synopsis: str | None = Field(default=None)
    release_date: date | None = Field(default=None)
    supports: list[MediaSupport] = Field(
        default_factory=list, description="Supports the item is owned on."
    )


class VideoFields(MediaHeader):
    original_title: str | None = Field(default=None)
    genres: list[VideoGenre] = Field(default_factory=list)
    languages_spoken: list[str] = Field(
        default_factory=list, description="ISO 639-1 codes of the audio tracks."
    )
    subtitles: list[str] = Field(
        default_factory=list, description="ISO 639-1 codes of the subtitle tracks."
    )
    producers: list[PersonModel] = Field(default_factory=list)
    directors: list[PersonModel] = Field(default_factory=list)


class MovieModel(VideoFields):
    media_type: Literal["movie"] = "movie"
    runtime: int | None = Field(default=None, ge=0, description="Runtime in minutes.")
    main_actors: list[PersonModel] = Field(default_factory=list)


class SeriesModel(VideoFields):
    media_type: Literal["series"] = "series"
    main_actors: list[PersonModel] = Field(default_factory=list)
    number_of_seasons: int | None = Field(default=None, ge=0)
    current_season: int | None = Field(default=None, ge=0)
    start_date: date | None = Field(default=None)
    end_date: date | None = Field(default=None)
    average_episode_runtime: int | None = Field(default=None, ge=0)
    number_of_episodes: int | None = Field(default=None, ge=0)
    max_episodes: int | None = Field(default=None, ge=0)


class AnimeModel(VideoFields):
    media_type: Literal["anime"] = "anime"
    number_of_seasons: int | None = Field(default=None, ge=0)
    current_season: int | None = Field(default=None, ge=0)
    end_date: date | None = Field(default=None)
    average_episode_runtime: int | None = Field(default=None, ge=0)
    number_of_episodes: int | None = Field(default=None, ge=0)
    max_episodes: int | None = Field(default=None, ge=0)


class CartoonModel(VideoFields):
    media_type: Literal["cartoon"] = "cartoon"
    runtime: int | None = Field(default=None, ge=0, description="Runtime in minutes.")


class BookModel(MediaHeader):
    media_type: Literal["book"] = "book"
    original_title: str | None = Field(default=None)
    genres: list[BookGenre] = Field(default_factory=list)
    isbn: str | None = Field(default=None)
    page_count: int | None = Field(default=None, ge=0)
    format: BookFormat | None = Field(default=None)
    authors: list[PersonModel] = Field(default_factory=list)
    publishers: list[CompanyModel] = Field(default_factory=list)


class ComicModel(BookModel):
    media_type: Literal["comic"] = "comic"  # type: ignore[assignment]
    volumes: int | None = Field(default=None, ge=0)
    current_volume: int | None = Field(default=None, ge=0)
    illustrators: list[PersonModel] = Field(default_factory=list)


class AlbumModel(MediaHeader):
    media_type: Literal["album"] = "album"
    genres: list[MusicGenre] = Field(default_factory=list)
    track_count: int | None = Field(default=None, ge=0)
    length: float | None = Field(default=None, ge=0, description="Total length in minutes.")
    label_records: list[CompanyModel] = Field(default_factory=list)
    singers: list[PersonModel] = Field(default_factory=list)


class VideoGameModel(MediaHeader):
    media_type: Literal["video_game"] = "video_game"
    original_title: str | None = Field(default=None)
    genres: list[VideoGameGenre] = Field(default_factory=list)
    multiplayer: bool = Field(default=False)
    languages: list[str] = Field(default_factory=list)
    platforms: list[VideoGamePlatform] = Field(default_factory=list)
    developers: list[CompanyModel] = Field(default_factory=list)
    publishers: list[CompanyModel] = Field(default_factory=list)


MediaItem = Annotated[
    Union[
        MovieModel,
        SeriesModel,
        AnimeModel,
        CartoonModel,
        BookModel,
        ComicModel,
        AlbumModel,
        VideoGameModel,
    ],
    Field(discriminator="media_type"),
]


class ConflictDetail(BaseModel):
    """Body returned when a create or update collides with an existing record."""

    message: str
    existing: dict[str, Any] = Field(
        description="The persisted record sharing the natural key of the payload."
    )


class DatabaseHealthStatus(BaseModel):
    """Represents relational store connectivity status."""

    status: Literal["ok", "error"] = Field(default="ok")
    detail: str | None = Field(
        default=None, description="Optional diagnostic message when the database is unavailable."
    )


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the API service.")
    database: DatabaseHealthStatus = Field(
        default_factory=DatabaseHealthStatus,
        description="Health information for the relational store.",
    )


class CatalogMetricsModel(BaseModel):
    """Aggregate record counts for dashboards."""

    total_media: int = Field(description="Total number of media records across every type.")
    media_counts: dict[str, int] = Field(
        default_factory=dict,
        description="Count of media records grouped by media type.",
    )
    total_contributors: int = Field(description="Total number of persisted contributors.")
    contributor_counts: dict[str, int] = Field(
        default_factory=dict,
        description="Count of contributors grouped by contributor kind.",
    )
