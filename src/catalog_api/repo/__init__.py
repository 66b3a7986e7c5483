"""Persistence repositories."""

from .categories import CategoryRepository
from .mods import (
    ModRelationRepository,
    ModRepository,
    download_repository,
    linked_source_repository,
    screenshot_repository,
)
from .sources import SourceRepository

__all__ = [
    "CategoryRepository",
    "ModRelationRepository",
    "ModRepository",
    "SourceRepository",
    "download_repository",
    "linked_source_repository",
    "screenshot_repository",
]
