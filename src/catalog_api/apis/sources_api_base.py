# coding: utf-8

from typing import ClassVar, Dict, List, Tuple  # noqa: F401

from pydantic import Field, StrictStr
from typing_extensions import Annotated
from catalog_api.models.source import Source, SourceSubmission


class BaseSourcesApi:
    subclasses: ClassVar[Tuple] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        BaseSourcesApi.subclasses = BaseSourcesApi.subclasses + (cls,)
    async def list_sources(
        self,
    ) -> List[Source]:
        ...


    async def get_source(
        self,
        url: Annotated[StrictStr, Field(description="Source URL slug")],
    ) -> Source:
        ...


    async def add_source(
        self,
        source_submission: SourceSubmission,
    ) -> Source:
        ...
