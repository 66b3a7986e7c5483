"""Helpers shared by the catalog entity services."""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from catalog_api.assets.store import AssetStore
from catalog_api.config.settings import CatalogSettings, get_settings
from catalog_api.db.session import SessionLocal, run_in_session
from catalog_api.errors import PersistenceConflictError, SubmissionValidationError

LOGGER = logging.getLogger(__name__)

MIN_SLUG_BYTES = 2

T = TypeVar("T")


def require_slug(url: str, *, kind: str) -> str:
    if len(url.encode("utf-8")) < MIN_SLUG_BYTES:
        raise SubmissionValidationError(
            f"Error parsing URL - {kind} URL length is below {MIN_SLUG_BYTES} bytes in size.",
            error="invalid_slug",
            details={"kind": kind, "url": url},
        )
    return url


def persist(
    func: Callable[[Session], T],
    *,
    session_factory: Optional[sessionmaker[Session]],
    action: str,
) -> T:
    """Run ``func`` in one transaction, mapping database failures to the taxonomy."""

    try:
        return run_in_session(func, session_factory=session_factory)
    except SQLAlchemyError as exc:
        cause = getattr(exc, "orig", None) or exc
        LOGGER.warning("Error %s: %s", action, cause)
        raise PersistenceConflictError(
            f"Error {action}: {cause}",
            details={"action": action},
        ) from exc


class EntityServiceBase:
    def __init__(
        self,
        *,
        session_factory: Optional[sessionmaker[Session]] = None,
        settings: Optional[CatalogSettings] = None,
        store: Optional[AssetStore] = None,
    ) -> None:
        self._session_factory = session_factory or SessionLocal
        self._settings = settings or get_settings()
        self._store = store or AssetStore(self._settings.resolved_public_dir())

    @property
    def session_factory(self) -> sessionmaker[Session]:
        return self._session_factory

    @property
    def store(self) -> AssetStore:
        return self._store


__all__ = ["EntityServiceBase", "MIN_SLUG_BYTES", "persist", "require_slug"]
