# coding: utf-8

"""
    Catalog Public API

    Submission and lookup endpoints for catalog mods, sources and categories.

    The version of the OpenAPI document: 1.0.0
"""


from fastapi import FastAPI

from catalog_api.apis.categories_api import router as CategoriesApiRouter
from catalog_api.apis.health_api import router as HealthApiRouter
from catalog_api.apis.mods_api import router as ModsApiRouter
from catalog_api.apis.sources_api import router as SourcesApiRouter

app = FastAPI(
    title="Catalog Public API",
    description="Submission and lookup endpoints for catalog mods, sources and categories.",
    version="1.0.0",
)

app.include_router(CategoriesApiRouter)
app.include_router(HealthApiRouter)
app.include_router(ModsApiRouter)
app.include_router(SourcesApiRouter)
