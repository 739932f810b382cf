"""FastAPI dependencies for the catalog API."""
from typing import Callable

from fastapi import Depends, Request

from .services import MediaService
from .state import AppState
from .stores import ContributorStore, MediaStore


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_contributor_store(app_state: AppState = Depends(get_app_state)) -> ContributorStore:
    """Return the contributor store dependency."""
    return app_state.contributor_store


def get_media_store(app_state: AppState = Depends(get_app_state)) -> MediaStore:
    """Return the media store dependency."""
    return app_state.media_store


def media_service_dependency(media_type: str) -> Callable[..., MediaService]:
    """Build a dependency returning the façade of ``media_type``."""

    def _get_media_service(app_state: AppState = Depends(get_app_state)) -> MediaService:
        return app_state.media_services[media_type]

    return _get_media_service
