"""Removal of asset files that no record references any more."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session, sessionmaker

from catalog_api.assets.store import ASSET_CATEGORIES, AssetStore
from catalog_api.db.session import run_in_session
from catalog_api.repo.mods import ModRepository
from catalog_api.repo.sources import SourceRepository

LOGGER = logging.getLogger(__name__)


class AssetSweeper:
    """Compares files under the asset directories with stored icon/banner paths.

    Files left behind by a failed asset-path update, or replaced by an upload
    with a different extension, are reported and optionally deleted.
    """

    def __init__(
        self,
        store: AssetStore,
        *,
        session_factory: Optional[sessionmaker[Session]] = None,
        source_repo: Optional[SourceRepository] = None,
        mod_repo: Optional[ModRepository] = None,
    ) -> None:
        self._store = store
        self._session_factory = session_factory
        self._source_repo = source_repo or SourceRepository()
        self._mod_repo = mod_repo or ModRepository()

    def referenced_paths(self) -> set[str]:
        def _collect(session: Session) -> set[str]:
            paths = self._source_repo.list_asset_paths(session=session)
            paths |= self._mod_repo.list_asset_paths(session=session)
            return paths

        return run_in_session(_collect, session_factory=self._session_factory)

    def sweep(self, *, dry_run: bool = False) -> list[str]:
        referenced = self.referenced_paths()
        orphans = [
            path
            for category in ASSET_CATEGORIES
            for path in self._store.list_files(category)
            if path not in referenced
        ]
        for path in orphans:
            if dry_run:
                LOGGER.info("Orphaned asset %s (dry run)", path)
                continue
            try:
                self._store.delete(path)
            except OSError as exc:
                LOGGER.warning("Failed to delete orphaned asset %s: %s", path, exc)
                continue
            LOGGER.info("Deleted orphaned asset %s", path)
        return orphans


__all__ = ["AssetSweeper"]
