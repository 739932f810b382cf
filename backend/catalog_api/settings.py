"""Runtime configuration for the catalog API."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.paths import default_database_url


class CatalogSettings(BaseSettings):
    """Environment-aware settings for the catalog service."""

    database_url: str = Field(
        default_factory=default_database_url,
        description="Connection URL for the catalog database.",
    )
    database_echo: bool = Field(
        default=False, description="Enable SQL echo for debugging queries."
    )
    api_prefix: str = Field(
        default="/media-library",
        description="Path prefix applied to every catalog route.",
    )
    log_level: str = Field(
        default="INFO", description="Root log level used by the server entry point."
    )
    host: str = Field(default="127.0.0.1", description="Interface the API server binds to.")
    port: int = Field(default=8000, description="Port the API server listens on.")

    model_config = SettingsConfigDict(
        env_prefix="MEDIALIB_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
