from __future__ import annotations

from typing import List, Optional

from catalog_api.apis.mods_api_base import BaseModsApi
from catalog_api.errors import CatalogError
from catalog_api.http.errors import http_error_for
from catalog_api.models.mod import Mod, ModSubmission
from catalog_api.service import facade
from catalog_api.service.mods import DEFAULT_PAGE_SIZE


class ModsApiImpl(BaseModsApi):
    async def list_mods(
        self,
        url: Optional[str],
        offset: Optional[int],
        count: Optional[int],
    ) -> List[Mod]:
        return facade.get_catalog_services().mods.list_mods(
            url=url,
            offset=offset or 0,
            count=count or DEFAULT_PAGE_SIZE,
        )

    async def get_mod(self, url: str) -> Mod:
        try:
            return facade.get_catalog_services().mods.get_mod(url)
        except CatalogError as exc:
            raise http_error_for(exc) from exc

    async def add_mod(self, mod_submission: ModSubmission) -> Mod:
        try:
            return await facade.get_catalog_services().mods.add_mod(mod_submission)
        except CatalogError as exc:
            raise http_error_for(exc) from exc
