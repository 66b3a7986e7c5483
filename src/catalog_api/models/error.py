# coding: utf-8

"""
    Catalog Public API (v1)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field, StrictStr

from catalog_api.models.base import CatalogModel


class Error(CatalogModel):
    """
    Structured error body returned for every failed request.
    """  # noqa: E501

    error: StrictStr = Field(description="Stable machine-readable error code.")
    message: StrictStr = Field(description="Human-readable explanation.")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Extra context, e.g. the failing asset field.")
    request_id: Optional[StrictStr] = Field(default=None, alias="requestId")
