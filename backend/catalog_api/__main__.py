"""CLI entry point for launching the catalog API with Uvicorn."""
import logging

import uvicorn

from .app import create_app
from .settings import CatalogSettings


def main() -> None:
    """Start a server for the catalog API."""

    settings = CatalogSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
