# coding: utf-8

from typing import ClassVar, Dict, List, Tuple  # noqa: F401

from pydantic import Field, StrictStr
from typing import Optional
from typing_extensions import Annotated
from catalog_api.models.mod import Mod, ModSubmission


class BaseModsApi:
    subclasses: ClassVar[Tuple] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        BaseModsApi.subclasses = BaseModsApi.subclasses + (cls,)
    async def list_mods(
        self,
        url: Annotated[Optional[StrictStr], Field(description="Only return the mod with this slug")],
        offset: Optional[Annotated[int, Field(strict=True, ge=0)]],
        count: Optional[Annotated[int, Field(strict=True, ge=1)]],
    ) -> List[Mod]:
        ...


    async def get_mod(
        self,
        url: Annotated[StrictStr, Field(description="Mod URL slug")],
    ) -> Mod:
        ...


    async def add_mod(
        self,
        mod_submission: ModSubmission,
    ) -> Mod:
        ...
