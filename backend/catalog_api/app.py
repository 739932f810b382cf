"""Application factory for the media library catalog API."""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import StoreFailureError
from .routers import catalogs, contributors, health, media, metrics
from .settings import CatalogSettings
from .state import AppState


def create_app(settings: CatalogSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or CatalogSettings()
    app_state = AppState(settings=resolved_settings)

    app = FastAPI(title="Media Library Catalog API", version="0.1.0")
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreFailureError)
    async def store_failure_handler(_request: Request, exc: StoreFailureError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    app.include_router(health.router)
    prefix = resolved_settings.api_prefix.rstrip("/")
    for router in (
        metrics.router,
        catalogs.router,
        *contributors.build_routers(),
        *media.build_routers(),
    ):
        app.include_router(router, prefix=prefix)

    return app
