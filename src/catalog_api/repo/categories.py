"""Repository for category records."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog_api.db.models import CategoryRecord
from catalog_api.repo.common import _assign


class CategoryRepository:
    def get(self, category_id: int, *, session: Session) -> Optional[CategoryRecord]:
        return session.get(CategoryRecord, category_id)

    def find_first(self, url: str, *, session: Session) -> Optional[CategoryRecord]:
        return session.execute(
            select(CategoryRecord).where(CategoryRecord.url == url)
        ).scalar_one_or_none()

    def find_many(
        self,
        *,
        session: Session,
        parent_id: Optional[int] = None,
        skip: int = 0,
        take: Optional[int] = None,
    ) -> list[CategoryRecord]:
        stmt = select(CategoryRecord).order_by(CategoryRecord.name, CategoryRecord.id)
        if parent_id is not None:
            stmt = stmt.where(CategoryRecord.parent_id == parent_id)
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
    ) -> tuple[CategoryRecord, bool]:
        record = self.find_first(url, session=session)
        if record is None:
            record = CategoryRecord(url=url, **create)
            session.add(record)
            session.flush()
            return record, True
        _assign(record, update)
        session.flush()
        return record, False
