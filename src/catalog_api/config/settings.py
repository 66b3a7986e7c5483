"""Catalog configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import AliasChoices, Field, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]


class CatalogApiSettings(BaseSettings):
    """Process/runtime settings for the catalog API server."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="CATALOG_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Bind address for the catalog API.")
    port: PositiveInt = Field(default=8090, description="Port for the catalog API.")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload (dev only).")
    log_level: Literal["critical", "error", "warning", "info", "debug", "trace"] = Field(
        default="info",
        description="Log level for catalog API / uvicorn.",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Origins allowed to call the API from a browser.",
    )


class CatalogSettings(BaseSettings):
    """Validated settings for asset ingestion and persistence."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    public_dir: Path = Field(
        default=PROJECT_ROOT / "public",
        validation_alias=AliasChoices("CATALOG_PUBLIC_DIR", "PUBLIC_DIR"),
        description="Root of the public assets tree; images are written below it.",
    )
    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy database URL. Defaults to a local SQLite file.",
    )
    encode_timeout_seconds: PositiveFloat = Field(
        default=30.0,
        description="Upper bound for client-side file encoding before submitting anyway.",
    )
    encode_poll_interval_seconds: PositiveFloat = Field(
        default=1.0,
        description="Progress log interval while waiting on client-side encoding.",
    )
    asset_write_timeout_seconds: PositiveFloat = Field(
        default=30.0,
        description="Timeout for a single asset write; expiry is reported as retryable.",
    )
    authoritative_relations: bool = Field(
        default=False,
        description="Delete child relations that are missing from a submitted list.",
    )

    def resolved_public_dir(self) -> Path:
        path = self.public_dir.expanduser()
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path


class CatalogClientSettings(BaseSettings):
    """Settings for the contributor-side submission client."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="CATALOG_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default="http://127.0.0.1:8090", description="Catalog API base URL.")
    timeout_seconds: PositiveInt = Field(default=60, description="HTTP timeout for API calls.")


@lru_cache()
def get_settings() -> CatalogSettings:
    """Return memoized catalog settings."""

    return CatalogSettings()


@lru_cache()
def get_api_settings() -> CatalogApiSettings:
    """Return memoized API process settings."""

    return CatalogApiSettings()


@lru_cache()
def get_client_settings() -> CatalogClientSettings:
    return CatalogClientSettings()
