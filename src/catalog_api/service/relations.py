"""Parsing and per-item reconciliation of mod child relations."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_api.errors import PersistenceConflictError, SubmissionValidationError
from catalog_api.models.mod import ModDownload, ModLinkedSource, ModScreenshot
from catalog_api.repo.mods import (
    ModRelationRepository,
    download_repository,
    linked_source_repository,
    screenshot_repository,
)

LOGGER = logging.getLogger(__name__)

DOWNLOADS = "downloads"
SCREENSHOTS = "screenshots"
SOURCES = "sources"

_ADAPTERS: dict[str, TypeAdapter] = {
    DOWNLOADS: TypeAdapter(list[ModDownload]),
    SCREENSHOTS: TypeAdapter(list[ModScreenshot]),
    SOURCES: TypeAdapter(list[ModLinkedSource]),
}


@dataclass(frozen=True)
class RelationItem:
    relation: str
    key: str
    fields: dict[str, Any]


@dataclass(frozen=True)
class RelationOutcome:
    relation: str
    key: str
    created: bool = False
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ParsedRelations:
    items: dict[str, list[RelationItem]] = field(default_factory=dict)

    def for_relation(self, relation: str) -> list[RelationItem]:
        return self.items.get(relation, [])


def _decode_list(relation: str, raw: Optional[str]) -> list[Any]:
    if raw is None or not raw.strip():
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SubmissionValidationError(
            f"Unable to parse {relation} list: {exc.msg}.",
            error="invalid_relations",
            details={"relation": relation},
        ) from exc
    try:
        return _ADAPTERS[relation].validate_python(value)
    except ValidationError as exc:
        raise SubmissionValidationError(
            f"Malformed {relation} list.",
            error="invalid_relations",
            details={
                "relation": relation,
                "errors": [
                    {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
                    for error in exc.errors()
                ],
            },
        ) from exc


def parse_relations(
    *,
    downloads: Optional[str],
    screenshots: Optional[str],
    sources: Optional[str],
) -> ParsedRelations:
    """Validate every relation list up front so bad input never mutates anything."""

    parsed = ParsedRelations()
    parsed.items[DOWNLOADS] = [
        RelationItem(DOWNLOADS, item.url, {"name": item.name})
        for item in _decode_list(DOWNLOADS, downloads)
    ]
    parsed.items[SCREENSHOTS] = [
        RelationItem(SCREENSHOTS, item.url, {})
        for item in _decode_list(SCREENSHOTS, screenshots)
    ]
    parsed.items[SOURCES] = [
        RelationItem(SOURCES, item.srcurl, {"url": item.url})
        for item in _decode_list(SOURCES, sources)
    ]
    return parsed


class RelationReconciler:
    """Upserts each relation item in its own savepoint and reports every outcome."""

    def __init__(
        self,
        repositories: Optional[dict[str, ModRelationRepository]] = None,
        *,
        authoritative: bool = False,
    ) -> None:
        self._repositories = repositories or {
            DOWNLOADS: download_repository(),
            SCREENSHOTS: screenshot_repository(),
            SOURCES: linked_source_repository(),
        }
        self._authoritative = authoritative

    def reconcile(
        self,
        mod_url: str,
        parsed: ParsedRelations,
        *,
        session: Session,
    ) -> list[RelationOutcome]:
        outcomes: list[RelationOutcome] = []
        for relation, repo in self._repositories.items():
            items = parsed.for_relation(relation)
            outcomes.extend(self._upsert_items(mod_url, repo, items, session=session))
            if self._authoritative:
                self._prune(mod_url, relation, repo, items, session=session)
        return outcomes

    def _upsert_items(
        self,
        mod_url: str,
        repo: ModRelationRepository,
        items: Sequence[RelationItem],
        *,
        session: Session,
    ) -> list[RelationOutcome]:
        outcomes: list[RelationOutcome] = []
        for item in items:
            try:
                with session.begin_nested():
                    _, created = repo.upsert(mod_url, item.key, item.fields, session=session)
            except SQLAlchemyError as exc:
                cause = getattr(exc, "orig", None) or exc
                LOGGER.warning(
                    "Failed to upsert %s item %r for mod %s: %s",
                    item.relation,
                    item.key,
                    mod_url,
                    cause,
                )
                outcomes.append(
                    RelationOutcome(
                        relation=item.relation,
                        key=item.key,
                        error=PersistenceConflictError.error,
                        message=str(cause),
                    )
                )
                continue
            outcomes.append(RelationOutcome(relation=item.relation, key=item.key, created=created))
        return outcomes

    def _prune(
        self,
        mod_url: str,
        relation: str,
        repo: ModRelationRepository,
        items: Sequence[RelationItem],
        *,
        session: Session,
    ) -> None:
        keep = {item.key for item in items}
        removed = repo.delete_except(mod_url, keep, session=session)
        if removed:
            LOGGER.info("Removed %d stale %s row(s) for mod %s", removed, relation, mod_url)


__all__ = [
    "DOWNLOADS",
    "ParsedRelations",
    "RelationItem",
    "RelationOutcome",
    "RelationReconciler",
    "SCREENSHOTS",
    "SOURCES",
    "parse_relations",
]
