"""Database models for the catalog API."""
from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import JSON, Text, UniqueConstraint
from sqlmodel import Field, SQLModel


class ContributorRecord(SQLModel, table=True):
    """Person or company credited on media records, partitioned by kind."""

    __tablename__ = "contributors"
    __table_args__ = (
        UniqueConstraint("kind", "natural_key", name="uq_contributors_kind_natural_key"),
    )

    id: int | None = Field(default=None, primary_key=True)
    kind: str = Field(index=True)
    first_name: str | None = Field(default=None)
    last_name: str | None = Field(default=None, index=True)
    name: str | None = Field(default=None, index=True)
    natural_key: str = Field(index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)


class MediaContributorLink(SQLModel, table=True):
    """Many-to-many association between a media record and a contributor."""

    __tablename__ = "media_contributor_links"

    media_type: str = Field(primary_key=True)
    media_id: int = Field(primary_key=True, index=True)
    role: str = Field(primary_key=True)
    contributor_id: int = Field(foreign_key="contributors.id", primary_key=True, index=True)


class MediaRecordBase(SQLModel):
    """Columns shared by every media table."""

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    synopsis: str | None = Field(default=None, sa_type=Text)
    release_date: date | None = Field(default=None, index=True)
    supports: list[str] = Field(default_factory=list, sa_type=JSON)
    title_key: str = Field(index=True)
    natural_key: str = Field(unique=True)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)


class VideoRecordBase(MediaRecordBase):
    original_title: str | None = Field(default=None)
    genres: list[str] = Field(default_factory=list, sa_type=JSON)
    languages_spoken: list[str] = Field(default_factory=list, sa_type=JSON)
    subtitles: list[str] = Field(default_factory=list, sa_type=JSON)


class MovieRecord(VideoRecordBase, table=True):
    __tablename__ = "movies"

    runtime: int | None = Field(default=None)


class SeriesRecord(VideoRecordBase, table=True):
    __tablename__ = "series"

    number_of_seasons: int | None = Field(default=None)
    current_season: int | None = Field(default=None)
    start_date: date | None = Field(default=None)
    end_date: date | None = Field(default=None)
    average_episode_runtime: int | None = Field(default=None)
    number_of_episodes: int | None = Field(default=None)
    max_episodes: int | None = Field(default=None)


class AnimeRecord(VideoRecordBase, table=True):
    __tablename__ = "animes"

    number_of_seasons: int | None = Field(default=None)
    current_season: int | None = Field(default=None)
    end_date: date | None = Field(default=None)
    average_episode_runtime: int | None = Field(default=None)
    number_of_episodes: int | None = Field(default=None)
    max_episodes: int | None = Field(default=None)


class CartoonRecord(VideoRecordBase, table=True):
    __tablename__ = "cartoons"

    runtime: int | None = Field(default=None)


class BookRecordBase(MediaRecordBase):
    original_title: str | None = Field(default=None)
    genres: list[str] = Field(default_factory=list, sa_type=JSON)
    isbn: str | None = Field(default=None, index=True)
    page_count: int | None = Field(default=None)
    format: str | None = Field(default=None)


class BookRecord(BookRecordBase, table=True):
    __tablename__ = "books"


class ComicRecord(BookRecordBase, table=True):
    __tablename__ = "comics"

    volumes: int | None = Field(default=None)
    current_volume: int | None = Field(default=None)


class AlbumRecord(MediaRecordBase, table=True):
    __tablename__ = "albums"

    genres: list[str] = Field(default_factory=list, sa_type=JSON)
    track_count: int | None = Field(default=None)
    length: float | None = Field(default=None)


class VideoGameRecord(MediaRecordBase, table=True):
    __tablename__ = "video_games"

    original_title: str | None = Field(default=None)
    genres: list[str] = Field(default_factory=list, sa_type=JSON)
    multiplayer: bool = Field(default=False)
    languages: list[str] = Field(default_factory=list, sa_type=JSON)
    platforms: list[str] = Field(default_factory=list, sa_type=JSON)
