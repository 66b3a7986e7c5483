"""Service layer for mod submissions, their child relations and lookups."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from catalog_api.assets.store import MODS_CATEGORY
from catalog_api.db.models import ModRecord
from catalog_api.db.session import run_in_session
from catalog_api.errors import AssetUpdateError, RecordNotFoundError
from catalog_api.models.mod import (
    Mod,
    ModDownload,
    ModLinkedSource,
    ModScreenshot,
    ModSubmission,
    RelationFailure,
)
from catalog_api.repo.mods import ModRepository
from catalog_api.service.assets import AssetIngestor, AssetRequest
from catalog_api.service.common import EntityServiceBase, persist, require_slug
from catalog_api.service.relations import (
    RelationOutcome,
    RelationReconciler,
    parse_relations,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


def _mod_from_record(
    record: ModRecord,
    *,
    include_relations: bool = True,
    failures: Optional[Sequence[RelationOutcome]] = None,
) -> Mod:
    mod = Mod(
        id=record.id,
        url=record.url,
        name=record.name,
        category_id=record.category_id,
        description=record.description,
        description_short=record.description_short,
        install=record.install,
        banner=record.banner,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )
    if include_relations:
        mod.downloads = [ModDownload(name=item.name, url=item.url) for item in record.downloads]
        mod.screenshots = [ModScreenshot(url=item.url) for item in record.screenshots]
        mod.sources = [
            ModLinkedSource(srcurl=item.source_url, url=item.url) for item in record.sources
        ]
    if failures:
        mod.relation_failures = [
            RelationFailure(
                relation=outcome.relation,
                key=outcome.key,
                error=outcome.error or "",
                message=outcome.message or "",
            )
            for outcome in failures
        ]
    return mod


class ModService(EntityServiceBase):
    def __init__(
        self,
        repo: Optional[ModRepository] = None,
        reconciler: Optional[RelationReconciler] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._repo = repo or ModRepository()
        self._reconciler = reconciler or RelationReconciler(
            authoritative=self._settings.authoritative_relations
        )
        self._assets = AssetIngestor(
            self._store,
            category=MODS_CATEGORY,
            write_timeout_seconds=self._settings.asset_write_timeout_seconds,
        )

    def get_mod(self, url: str) -> Mod:
        def _get(session) -> Optional[Mod]:
            record = self._repo.find_first(url, session=session, include_relations=True)
            return _mod_from_record(record) if record is not None else None

        mod = run_in_session(_get, session_factory=self.session_factory)
        if mod is None:
            raise RecordNotFoundError("mod", url)
        return mod

    def list_mods(
        self,
        *,
        url: Optional[str] = None,
        offset: int = 0,
        count: Optional[int] = DEFAULT_PAGE_SIZE,
        category_id: Optional[int] = None,
    ) -> list[Mod]:
        """List mods in id order; ``count=None`` returns every remaining row."""

        def _list(session) -> list[Mod]:
            records = self._repo.find_many(
                session=session,
                url=url,
                category_id=category_id,
                skip=max(offset, 0),
                take=count,
            )
            return [_mod_from_record(record, include_relations=False) for record in records]

        return run_in_session(_list, session_factory=self.session_factory)

    def list_all_mods(self) -> list[Mod]:
        return self.list_mods(count=None)

    async def add_mod(self, submission: ModSubmission) -> Mod:
        slug = require_slug(submission.url, kind="mod")
        parsed = parse_relations(
            downloads=submission.downloads,
            screenshots=submission.screenshots,
            sources=submission.sources,
        )

        def _upsert(session) -> tuple[bool, list[RelationOutcome]]:
            fields = {
                "name": submission.name,
                "category_id": submission.category,
                "description": submission.description,
                "description_short": submission.description_short,
                "install": submission.install,
            }
            _, created = self._repo.upsert(slug, create=fields, update=fields, session=session)
            outcomes = self._reconciler.reconcile(slug, parsed, session=session)
            return created, outcomes

        created, outcomes = persist(
            _upsert,
            session_factory=self.session_factory,
            action="creating or updating mod",
        )
        failures = [outcome for outcome in outcomes if not outcome.ok]
        LOGGER.info(
            "%s mod %s (%d relation item(s), %d failed)",
            "Created" if created else "Updated",
            slug,
            len(outcomes),
            len(failures),
        )

        changes = await self._assets.ingest(
            slug,
            [AssetRequest("banner", submission.banner, remove=submission.bremove)],
        )
        if changes:
            self._update_asset_paths(slug, changes)

        def _reload(session) -> Optional[Mod]:
            record = self._repo.find_first(slug, session=session, include_relations=True)
            if record is None:
                return None
            return _mod_from_record(record, failures=failures)

        mod = run_in_session(_reload, session_factory=self.session_factory)
        if mod is None:
            raise RecordNotFoundError("mod", slug)
        return mod

    def _update_asset_paths(self, slug: str, changes: dict[str, Optional[str]]) -> None:
        def _update(session) -> bool:
            return self._repo.update(slug, changes, session=session) is not None

        try:
            updated = run_in_session(_update, session_factory=self.session_factory)
        except SQLAlchemyError as exc:
            LOGGER.warning(
                "Error updating mod %s with banner data; written files are unreferenced: %s",
                slug,
                changes,
            )
            raise AssetUpdateError(
                f"Error updating mod with banner data. {exc}",
                field=",".join(sorted(changes)),
                details={"paths": changes},
            ) from exc
        if not updated:
            raise AssetUpdateError(
                f"Mod '{slug}' disappeared before its banner could be set.",
                field=",".join(sorted(changes)),
                details={"paths": changes},
            )
        LOGGER.info("Updated banner path for mod %s: %s", slug, changes.get("banner"))


__all__ = ["DEFAULT_PAGE_SIZE", "ModService"]
