from __future__ import annotations

from typing import List

from catalog_api.apis.sources_api_base import BaseSourcesApi
from catalog_api.errors import CatalogError
from catalog_api.http.errors import http_error_for
from catalog_api.models.source import Source, SourceSubmission
from catalog_api.service import facade


class SourcesApiImpl(BaseSourcesApi):
    async def list_sources(self) -> List[Source]:
        return facade.get_catalog_services().sources.list_sources()

    async def get_source(self, url: str) -> Source:
        try:
            return facade.get_catalog_services().sources.get_source(url)
        except CatalogError as exc:
            raise http_error_for(exc) from exc

    async def add_source(self, source_submission: SourceSubmission) -> Source:
        try:
            return await facade.get_catalog_services().sources.add_source(source_submission)
        except CatalogError as exc:
            raise http_error_for(exc) from exc
