# coding: utf-8

from typing import Dict, List  # noqa: F401
import importlib
import pkgutil

from catalog_api.apis.mods_api_base import BaseModsApi
import catalog_api.impl

from fastapi import (  # noqa: F401
    APIRouter,
    Body,
    HTTPException,
    Path,
    Query,
    status,
)

from pydantic import Field, StrictStr
from typing import Optional
from typing_extensions import Annotated
from catalog_api.models.error import Error
from catalog_api.models.mod import Mod, ModSubmission

router = APIRouter()

ns_pkg = catalog_api.impl
for _, name, _ in pkgutil.iter_modules(ns_pkg.__path__, ns_pkg.__name__ + "."):
    importlib.import_module(name)


@router.get(
    "/api/v1/mods",
    responses={
        200: {"model": List[Mod], "description": "OK"},
    },
    tags=["Mods"],
    summary="List mods",
    response_model_by_alias=True,
)
async def list_mods(
    url: Annotated[Optional[StrictStr], Field(description="Only return the mod with this slug")] = Query(None, description="Only return the mod with this slug", alias="url"),
    offset: Optional[Annotated[int, Field(ge=0)]] = Query(None, description="", alias="offset", ge=0),
    count: Optional[Annotated[int, Field(ge=1)]] = Query(None, description="", alias="count", ge=1),
) -> List[Mod]:
    if not BaseModsApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseModsApi.subclasses[0]().list_mods(url, offset, count)


@router.get(
    "/api/v1/mods/{url}",
    responses={
        200: {"model": Mod, "description": "OK"},
        404: {"model": Error, "description": "Not Found"},
    },
    tags=["Mods"],
    summary="Get a mod with its downloads, screenshots and sources",
    response_model_by_alias=True,
)
async def get_mod(
    url: Annotated[StrictStr, Field(description="Mod URL slug")] = Path(..., description="Mod URL slug"),
) -> Mod:
    if not BaseModsApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseModsApi.subclasses[0]().get_mod(url)


@router.post(
    "/api/v1/mods",
    responses={
        200: {"model": Mod, "description": "Created or updated"},
        400: {"model": Error, "description": "Invalid submission"},
        409: {"model": Error, "description": "Persistence conflict"},
        415: {"model": Error, "description": "Unsupported image format"},
        422: {"model": Error, "description": "Undecodable image data"},
        500: {"model": Error, "description": "Asset could not be stored"},
    },
    tags=["Mods"],
    summary="Create or edit a mod",
    response_model_by_alias=True,
)
async def add_mod(
    mod_submission: ModSubmission = Body(..., description=""),
) -> Mod:
    if not BaseModsApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseModsApi.subclasses[0]().add_mod(mod_submission)
