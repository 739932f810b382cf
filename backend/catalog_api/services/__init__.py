"""Service layer implementing catalog reconciliation."""

from .media_service import MediaService, build_media_services
from .reconciler import MediaReconciler
from .resolver import ContributorResolver

__all__ = [
    "ContributorResolver",
    "MediaReconciler",
    "MediaService",
    "build_media_services",
]
