"""Facade bundling the catalog services used by the HTTP layer."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from sqlalchemy.orm import Session, sessionmaker

from catalog_api.assets.store import AssetStore
from catalog_api.config.settings import CatalogSettings, get_settings

from .categories import CategoryService
from .mods import ModService
from .sources import SourceService


class CatalogServiceFacade:
    def __init__(
        self,
        *,
        session_factory: Optional[sessionmaker[Session]] = None,
        settings: Optional[CatalogSettings] = None,
        store: Optional[AssetStore] = None,
    ) -> None:
        settings = settings or get_settings()
        store = store or AssetStore(settings.resolved_public_dir())
        shared = {"session_factory": session_factory, "settings": settings, "store": store}
        self.sources = SourceService(**shared)
        self.mods = ModService(**shared)
        self.categories = CategoryService(**shared)


@lru_cache()
def get_catalog_services() -> CatalogServiceFacade:
    return CatalogServiceFacade()


__all__ = ["CatalogServiceFacade", "get_catalog_services"]
