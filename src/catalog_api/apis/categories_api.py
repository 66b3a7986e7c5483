# coding: utf-8

from typing import Dict, List  # noqa: F401
import importlib
import pkgutil

from catalog_api.apis.categories_api_base import BaseCategoriesApi
import catalog_api.impl

from fastapi import (  # noqa: F401
    APIRouter,
    Body,
    HTTPException,
    status,
)

from catalog_api.models.category import Category, CategorySubmission
from catalog_api.models.error import Error

router = APIRouter()

ns_pkg = catalog_api.impl
for _, name, _ in pkgutil.iter_modules(ns_pkg.__path__, ns_pkg.__name__ + "."):
    importlib.import_module(name)


@router.get(
    "/api/v1/categories",
    responses={
        200: {"model": List[Category], "description": "OK"},
    },
    tags=["Categories"],
    summary="List categories",
    response_model_by_alias=True,
)
async def list_categories(
) -> List[Category]:
    if not BaseCategoriesApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseCategoriesApi.subclasses[0]().list_categories()


@router.post(
    "/api/v1/categories",
    responses={
        200: {"model": Category, "description": "Created or updated"},
        400: {"model": Error, "description": "Invalid submission"},
        409: {"model": Error, "description": "Persistence conflict"},
    },
    tags=["Categories"],
    summary="Create or edit a category",
    response_model_by_alias=True,
)
async def add_category(
    category_submission: CategorySubmission = Body(..., description=""),
) -> Category:
    if not BaseCategoriesApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseCategoriesApi.subclasses[0]().add_category(category_submission)
