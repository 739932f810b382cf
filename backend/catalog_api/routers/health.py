"""Health endpoints."""
from fastapi import APIRouter, Depends

from ..db import ping
from ..dependencies import get_app_state
from ..schemas import DatabaseHealthStatus, HealthStatus
from ..state import AppState

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
def get_health(app_state: AppState = Depends(get_app_state)) -> HealthStatus:
    """Return service heartbeat information."""

    database_status = DatabaseHealthStatus(status="ok")
    if not ping(app_state.engine):
        database_status = DatabaseHealthStatus(status="error", detail="database_unreachable")
    return HealthStatus(database=database_status)
