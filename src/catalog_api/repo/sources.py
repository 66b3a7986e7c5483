"""Repository for source records."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog_api.db.models import SourceRecord
from catalog_api.repo.common import _assign


class SourceRepository:
    def find_first(self, url: str, *, session: Session) -> Optional[SourceRecord]:
        return session.execute(
            select(SourceRecord).where(SourceRecord.url == url)
        ).scalar_one_or_none()

    def find_many(
        self,
        *,
        session: Session,
        url: Optional[str] = None,
        skip: int = 0,
        take: Optional[int] = None,
    ) -> list[SourceRecord]:
        stmt = select(SourceRecord).order_by(SourceRecord.name, SourceRecord.url)
        if url:
            stmt = stmt.where(SourceRecord.url == url)
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
    ) -> tuple[SourceRecord, bool]:
        record = self.find_first(url, session=session)
        if record is None:
            record = SourceRecord(url=url, **create)
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
    ) -> Optional[SourceRecord]:
        record = self.find_first(url, session=session)
        if record is None:
            return None
        _assign(record, fields)
        session.flush()
        return record

    def list_asset_paths(self, *, session: Session) -> set[str]:
        rows = session.execute(select(SourceRecord.icon, SourceRecord.banner)).all()
        return {path for row in rows for path in row if path}
