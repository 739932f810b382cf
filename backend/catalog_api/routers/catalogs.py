"""Endpoints exposing the constant catalogs."""
from fastapi import APIRouter

from ..catalogs import BookFormat, MediaSupport, VideoGamePlatform, catalog_values

router = APIRouter(tags=["catalogs"])


@router.get("/supports/", response_model=list[str])
def list_supports() -> list[str]:
    """Return every support a media item can be owned on."""
    return catalog_values(MediaSupport)


@router.get("/platforms/", response_model=list[str])
def list_platforms() -> list[str]:
    """Return every video game platform."""
    return catalog_values(VideoGamePlatform)


@router.get("/book-formats/", response_model=list[str])
def list_book_formats() -> list[str]:
    return catalog_values(BookFormat)
