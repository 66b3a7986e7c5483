# coding: utf-8

from typing import ClassVar, Dict, List, Tuple  # noqa: F401

from catalog_api.models.category import Category, CategorySubmission


class BaseCategoriesApi:
    subclasses: ClassVar[Tuple] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        BaseCategoriesApi.subclasses = BaseCategoriesApi.subclasses + (cls,)
    async def list_categories(
        self,
    ) -> List[Category]:
        ...


    async def add_category(
        self,
        category_submission: CategorySubmission,
    ) -> Category:
        ...
