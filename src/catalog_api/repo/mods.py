"""Repositories for mod records and their child relations."""

from __future__ import annotations

from typing import Any, Collection, Generic, Mapping, Optional, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from catalog_api.db.models import (
    ModDownloadRecord,
    ModRecord,
    ModScreenshotRecord,
    ModSourceRecord,
)
from catalog_api.repo.common import _assign


class ModRepository:
    def find_first(
        self,
        url: str,
        *,
        session: Session,
        include_relations: bool = False,
    ) -> Optional[ModRecord]:
        stmt = select(ModRecord).where(ModRecord.url == url)
        if include_relations:
            stmt = stmt.options(
                selectinload(ModRecord.downloads),
                selectinload(ModRecord.screenshots),
                selectinload(ModRecord.sources),
            )
        return session.execute(stmt).scalar_one_or_none()

    def find_many(
        self,
        *,
        session: Session,
        url: Optional[str] = None,
        category_id: Optional[int] = None,
        skip: int = 0,
        take: Optional[int] = None,
    ) -> list[ModRecord]:
        stmt = select(ModRecord).order_by(ModRecord.id)
        if url:
            stmt = stmt.where(ModRecord.url == url)
        if category_id is not None:
            stmt = stmt.where(ModRecord.category_id == category_id)
        if skip:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(take)
        return list(session.execute(stmt).scalars().all())

    def upsert(
        self,
        url: str,
        *,
        create: Mapping[str, Any],
        update: Mapping[str, Any],
        session: Session,
    ) -> tuple[ModRecord, bool]:
        record = self.find_first(url, session=session)
        if record is None:
            record = ModRecord(url=url, **create)
            session.add(record)
            session.flush()
            return record, True
        _assign(record, update)
        session.flush()
        return record, False

    def update(
        self,
        url: str,
        fields: Mapping[str, Any],
        *,
        session: Session,
    ) -> Optional[ModRecord]:
        record = self.find_first(url, session=session)
        if record is None:
            return None
        _assign(record, fields)
        session.flush()
        return record

    def list_asset_paths(self, *, session: Session) -> set[str]:
        rows = session.execute(
            select(ModRecord.banner).where(ModRecord.banner.is_not(None))
        ).scalars()
        return {path for path in rows if path}


R = TypeVar("R", ModDownloadRecord, ModScreenshotRecord, ModSourceRecord)


class ModRelationRepository(Generic[R]):
    """Upserts one kind of mod child row keyed by ``(mod_url, key_column)``."""

    def __init__(self, model: type[R], key_column: str) -> None:
        self._model = model
        self._key_column = key_column

    @property
    def key_column(self) -> str:
        return self._key_column

    def _key_attr(self):
        return getattr(self._model, self._key_column)

    def find_first(self, mod_url: str, key: str, *, session: Session) -> Optional[R]:
        return session.execute(
            select(self._model).where(
                self._model.mod_url == mod_url,
                self._key_attr() == key,
            )
        ).scalar_one_or_none()

    def list_for(self, mod_url: str, *, session: Session) -> list[R]:
        return list(
            session.execute(
                select(self._model)
                .where(self._model.mod_url == mod_url)
                .order_by(self._model.id)
            ).scalars().all()
        )

    def upsert(
        self,
        mod_url: str,
        key: str,
        fields: Mapping[str, Any],
        *,
        session: Session,
    ) -> tuple[R, bool]:
        record = self.find_first(mod_url, key, session=session)
        if record is None:
            record = self._model(mod_url=mod_url, **{self._key_column: key}, **fields)
            session.add(record)
            session.flush()
            return record, True
        _assign(record, fields)
        session.flush()
        return record, False

    def delete_except(self, mod_url: str, keys: Collection[str], *, session: Session) -> int:
        stmt = delete(self._model).where(self._model.mod_url == mod_url)
        if keys:
            stmt = stmt.where(self._key_attr().not_in(list(keys)))
        result = session.execute(stmt)
        return int(result.rowcount or 0)


def download_repository() -> ModRelationRepository[ModDownloadRecord]:
    return ModRelationRepository(ModDownloadRecord, "url")


def screenshot_repository() -> ModRelationRepository[ModScreenshotRecord]:
    return ModRelationRepository(ModScreenshotRecord, "url")


def linked_source_repository() -> ModRelationRepository[ModSourceRecord]:
    return ModRelationRepository(ModSourceRecord, "source_url")
