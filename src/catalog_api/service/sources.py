"""Service layer for source submissions and lookups."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from catalog_api.assets.store import SOURCES_CATEGORY
from catalog_api.db.models import SourceRecord
from catalog_api.db.session import run_in_session
from catalog_api.errors import AssetUpdateError, RecordNotFoundError
from catalog_api.models.source import Source, SourceSubmission
from catalog_api.repo.sources import SourceRepository
from catalog_api.service.assets import AssetIngestor, AssetRequest
from catalog_api.service.common import EntityServiceBase, persist, require_slug

LOGGER = logging.getLogger(__name__)


def _source_from_record(record: SourceRecord) -> Source:
    return Source(
        url=record.url,
        name=record.name,
        classes=record.classes,
        icon=record.icon,
        banner=record.banner,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class SourceService(EntityServiceBase):
    def __init__(self, repo: Optional[SourceRepository] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repo = repo or SourceRepository()
        self._assets = AssetIngestor(
            self._store,
            category=SOURCES_CATEGORY,
            write_timeout_seconds=self._settings.asset_write_timeout_seconds,
        )

    def get_source(self, url: str) -> Source:
        def _get(session) -> Optional[SourceRecord]:
            return self._repo.find_first(url, session=session)

        record = run_in_session(_get, session_factory=self.session_factory)
        if record is None:
            raise RecordNotFoundError("source", url)
        return _source_from_record(record)

    def list_sources(self) -> list[Source]:
        def _list(session) -> list[SourceRecord]:
            return self._repo.find_many(session=session)

        records = run_in_session(_list, session_factory=self.session_factory)
        return [_source_from_record(record) for record in records]

    async def add_source(self, submission: SourceSubmission) -> Source:
        slug = require_slug(submission.url, kind="source")

        def _upsert(session) -> tuple[SourceRecord, bool]:
            fields = {"name": submission.name, "classes": submission.classes}
            return self._repo.upsert(slug, create=fields, update=fields, session=session)

        record, created = persist(
            _upsert,
            session_factory=self.session_factory,
            action="creating or updating source",
        )
        LOGGER.info("%s source %s", "Created" if created else "Updated", slug)

        changes = await self._assets.ingest(
            slug,
            [
                AssetRequest("icon", submission.icon, remove=submission.iremove),
                AssetRequest(
                    "banner",
                    submission.banner,
                    remove=submission.bremove,
                    banner_suffix=True,
                ),
            ],
        )
        if changes:
            record = self._update_asset_paths(slug, changes)

        return _source_from_record(record)

    def _update_asset_paths(self, slug: str, changes: dict[str, Optional[str]]) -> SourceRecord:
        def _update(session) -> Optional[SourceRecord]:
            return self._repo.update(slug, changes, session=session)

        try:
            record = run_in_session(_update, session_factory=self.session_factory)
        except SQLAlchemyError as exc:
            LOGGER.warning(
                "Error updating source %s with icon and banner data; written files are unreferenced: %s",
                slug,
                changes,
            )
            raise AssetUpdateError(
                f"Error updating source with icon and banner data. {exc}",
                field=",".join(sorted(changes)),
                details={"paths": changes},
            ) from exc
        if record is None:
            raise AssetUpdateError(
                f"Source '{slug}' disappeared before its icon and banner could be set.",
                field=",".join(sorted(changes)),
                details={"paths": changes},
            )
        LOGGER.info("Updated asset paths for source %s: %s", slug, changes)
        return record


__all__ = ["SourceService"]
