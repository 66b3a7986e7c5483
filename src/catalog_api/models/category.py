# coding: utf-8

"""
    Catalog Public API (v1)
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from catalog_api.models.base import CatalogModel


class CategorySubmission(CatalogModel):
    name: StrictStr
    url: StrictStr
    parent_id: Optional[StrictInt] = Field(default=None, alias="parentId")
    has_bg: StrictBool = Field(default=False, alias="hasBg")


class Category(CatalogModel):
    id: StrictInt
    url: StrictStr
    name: StrictStr
    parent_id: Optional[StrictInt] = Field(default=None, alias="parentId")
    icon: Optional[StrictStr] = None
    has_bg: StrictBool = Field(default=False, alias="hasBg")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
