"""Service layer for catalog categories."""

from __future__ import annotations

import logging
from typing import Optional

from catalog_api.db.models import CategoryRecord
from catalog_api.db.session import run_in_session
from catalog_api.errors import RecordNotFoundError
from catalog_api.models.category import Category, CategorySubmission
from catalog_api.repo.categories import CategoryRepository
from catalog_api.service.common import EntityServiceBase, persist, require_slug

LOGGER = logging.getLogger(__name__)


def _category_from_record(record: CategoryRecord) -> Category:
    return Category(
        id=record.id,
        url=record.url,
        name=record.name,
        parent_id=record.parent_id,
        icon=record.icon,
        has_bg=record.has_bg,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class CategoryService(EntityServiceBase):
    def __init__(self, repo: Optional[CategoryRepository] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repo = repo or CategoryRepository()

    def get_category(self, category_id: int) -> Category:
        def _get(session) -> Optional[CategoryRecord]:
            return self._repo.get(category_id, session=session)

        record = run_in_session(_get, session_factory=self.session_factory)
        if record is None:
            raise RecordNotFoundError("category", category_id)
        return _category_from_record(record)

    def list_categories(self, *, parent_id: Optional[int] = None) -> list[Category]:
        def _list(session) -> list[CategoryRecord]:
            return self._repo.find_many(session=session, parent_id=parent_id)

        records = run_in_session(_list, session_factory=self.session_factory)
        return [_category_from_record(record) for record in records]

    def add_category(self, submission: CategorySubmission) -> Category:
        slug = require_slug(submission.url, kind="category")

        def _upsert(session) -> tuple[CategoryRecord, bool]:
            fields = {
                "name": submission.name,
                "parent_id": submission.parent_id,
                "has_bg": submission.has_bg,
            }
            return self._repo.upsert(slug, create=fields, update=fields, session=session)

        record, created = persist(
            _upsert,
            session_factory=self.session_factory,
            action="creating or updating category",
        )
        LOGGER.info("%s category %s (id=%s)", "Created" if created else "Updated", slug, record.id)
        return _category_from_record(record)


__all__ = ["CategoryService"]
