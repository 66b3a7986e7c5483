"""Catalog services: submission pipelines and lookups."""

from .assets import AssetIngestor, AssetRequest
from .categories import CategoryService
from .facade import CatalogServiceFacade, get_catalog_services
from .mods import ModService
from .relations import RelationOutcome, RelationReconciler, parse_relations
from .sources import SourceService
from .sweeper import AssetSweeper

__all__ = [
    "AssetIngestor",
    "AssetRequest",
    "AssetSweeper",
    "CatalogServiceFacade",
    "CategoryService",
    "ModService",
    "RelationOutcome",
    "RelationReconciler",
    "SourceService",
    "get_catalog_services",
    "parse_relations",
]
