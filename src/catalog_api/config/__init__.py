"""Configuration helpers."""

from .settings import (
    CatalogApiSettings,
    CatalogClientSettings,
    CatalogSettings,
    get_api_settings,
    get_client_settings,
    get_settings,
)

__all__ = [
    "CatalogApiSettings",
    "CatalogClientSettings",
    "CatalogSettings",
    "get_api_settings",
    "get_client_settings",
    "get_settings",
]
