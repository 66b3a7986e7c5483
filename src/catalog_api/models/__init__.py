# coding: utf-8

from catalog_api.models.category import Category, CategorySubmission
from catalog_api.models.error import Error
from catalog_api.models.mod import (
    Mod,
    ModDownload,
    ModLinkedSource,
    ModScreenshot,
    ModSubmission,
    RelationFailure,
)
from catalog_api.models.source import Source, SourceSubmission

__all__ = [
    "Category",
    "CategorySubmission",
    "Error",
    "Mod",
    "ModDownload",
    "ModLinkedSource",
    "ModScreenshot",
    "ModSubmission",
    "RelationFailure",
    "Source",
    "SourceSubmission",
]
