"""Aggregate catalog statistics."""
from fastapi import APIRouter, Depends

from ..dependencies import get_contributor_store, get_media_store
from ..schemas import CatalogMetricsModel
from ..stores import ContributorStore, MediaStore

router = APIRouter(tags=["metrics"])


@router.get("/metrics", response_model=CatalogMetricsModel)
def catalog_metrics(
    media_store: MediaStore = Depends(get_media_store),
    contributor_store: ContributorStore = Depends(get_contributor_store),
) -> CatalogMetricsModel:
    """Return record counts per media type and contributor kind."""

    media_counts = media_store.counts()
    contributor_counts = contributor_store.counts()
    return CatalogMetricsModel(
        total_media=sum(media_counts.values()),
        media_counts=media_counts,
        total_contributors=sum(contributor_counts.values()),
        contributor_counts=contributor_counts,
    )
