# coding: utf-8

"""
    Catalog Public API (v1)
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from catalog_api.models.base import CatalogModel


class ModDownload(CatalogModel):
    name: Optional[StrictStr] = None
    url: StrictStr


class ModScreenshot(CatalogModel):
    url: StrictStr


class ModLinkedSource(CatalogModel):
    srcurl: StrictStr = Field(description="URL slug of the linked source.")
    url: StrictStr = Field(description="Location of the mod on that source.")


class RelationFailure(CatalogModel):
    """
    One child relation item that could not be stored.
    """  # noqa: E501

    relation: StrictStr
    key: StrictStr
    error: StrictStr
    message: StrictStr


class ModSubmission(CatalogModel):
    """
    Create-or-edit payload for a mod. Relation lists are JSON-encoded strings.
    """  # noqa: E501

    name: StrictStr
    url: StrictStr = Field(description="Natural key of the mod (URL slug).")
    category: Optional[StrictInt] = Field(default=None, description="Category id.")
    description: StrictStr = ""
    description_short: StrictStr = Field(default="", alias="descriptionShort")
    install: Optional[StrictStr] = None
    banner: Optional[StrictStr] = None
    downloads: Optional[StrictStr] = Field(default=None, description="JSON array of {name?, url}.")
    screenshots: Optional[StrictStr] = Field(default=None, description="JSON array of {url}.")
    sources: Optional[StrictStr] = Field(default=None, description="JSON array of {srcurl, url}.")
    bremove: StrictBool = Field(default=False, description="Clear the stored banner.")


class Mod(CatalogModel):
    id: Optional[StrictInt] = None
    url: StrictStr
    name: StrictStr
    category_id: Optional[StrictInt] = Field(default=None, alias="categoryId")
    description: StrictStr = ""
    description_short: StrictStr = Field(default="", alias="descriptionShort")
    install: Optional[StrictStr] = None
    banner: Optional[StrictStr] = None
    downloads: List[ModDownload] = Field(default_factory=list)
    screenshots: List[ModScreenshot] = Field(default_factory=list)
    sources: List[ModLinkedSource] = Field(default_factory=list)
    relation_failures: Optional[List[RelationFailure]] = Field(default=None, alias="relationFailures")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
