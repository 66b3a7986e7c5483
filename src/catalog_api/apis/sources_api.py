# coding: utf-8

from typing import Dict, List  # noqa: F401
import importlib
import pkgutil

from catalog_api.apis.sources_api_base import BaseSourcesApi
import catalog_api.impl

from fastapi import (  # noqa: F401
    APIRouter,
    Body,
    HTTPException,
    Path,
    status,
)

from pydantic import Field, StrictStr
from typing_extensions import Annotated
from catalog_api.models.error import Error
from catalog_api.models.source import Source, SourceSubmission

router = APIRouter()

ns_pkg = catalog_api.impl
for _, name, _ in pkgutil.iter_modules(ns_pkg.__path__, ns_pkg.__name__ + "."):
    importlib.import_module(name)


@router.get(
    "/api/v1/sources",
    responses={
        200: {"model": List[Source], "description": "OK"},
    },
    tags=["Sources"],
    summary="List sources",
    response_model_by_alias=True,
)
async def list_sources(
) -> List[Source]:
    if not BaseSourcesApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseSourcesApi.subclasses[0]().list_sources()


@router.get(
    "/api/v1/sources/{url}",
    responses={
        200: {"model": Source, "description": "OK"},
        404: {"model": Error, "description": "Not Found"},
    },
    tags=["Sources"],
    summary="Get a source by URL slug",
    response_model_by_alias=True,
)
async def get_source(
    url: Annotated[StrictStr, Field(description="Source URL slug")] = Path(..., description="Source URL slug"),
) -> Source:
    if not BaseSourcesApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseSourcesApi.subclasses[0]().get_source(url)


@router.post(
    "/api/v1/sources",
    responses={
        200: {"model": Source, "description": "Created or updated"},
        400: {"model": Error, "description": "Invalid submission"},
        409: {"model": Error, "description": "Persistence conflict"},
        415: {"model": Error, "description": "Unsupported image format"},
        422: {"model": Error, "description": "Undecodable image data"},
        500: {"model": Error, "description": "Asset could not be stored"},
    },
    tags=["Sources"],
    summary="Create or edit a source",
    response_model_by_alias=True,
)
async def add_source(
    source_submission: SourceSubmission = Body(..., description=""),
) -> Source:
    if not BaseSourcesApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseSourcesApi.subclasses[0]().add_source(source_submission)
