# coding: utf-8

"""
    Catalog Public API (v1)
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, StrictBool, StrictStr

from catalog_api.models.base import CatalogModel


class SourceSubmission(CatalogModel):
    """
    Create-or-edit payload for a source. ``icon``/``banner`` are data URLs or null.
    """  # noqa: E501

    name: StrictStr
    url: StrictStr = Field(description="Natural key of the source (URL slug).")
    icon: Optional[StrictStr] = None
    banner: Optional[StrictStr] = None
    classes: Optional[StrictStr] = None
    iremove: StrictBool = Field(default=False, description="Clear the stored icon.")
    bremove: StrictBool = Field(default=False, description="Clear the stored banner.")


class Source(CatalogModel):
    url: StrictStr
    name: StrictStr
    classes: Optional[StrictStr] = None
    icon: Optional[StrictStr] = None
    banner: Optional[StrictStr] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
