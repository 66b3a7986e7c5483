from __future__ import annotations

from typing import List

from catalog_api.apis.categories_api_base import BaseCategoriesApi
from catalog_api.errors import CatalogError
from catalog_api.http.errors import http_error_for
from catalog_api.models.category import Category, CategorySubmission
from catalog_api.service import facade


class CategoriesApiImpl(BaseCategoriesApi):
    async def list_categories(self) -> List[Category]:
        return facade.get_catalog_services().categories.list_categories()

    async def add_category(self, category_submission: CategorySubmission) -> Category:
        try:
            return facade.get_catalog_services().categories.add_category(category_submission)
        except CatalogError as exc:
            raise http_error_for(exc) from exc
