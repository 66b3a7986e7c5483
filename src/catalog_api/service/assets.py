"""Decode, sniff and store uploaded icons and banners."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from catalog_api.assets.payload import decode_data_url
from catalog_api.assets.sniffer import UNKNOWN_EXTENSION, sniff_extension
from catalog_api.assets.store import AssetStore, asset_relative_path
from catalog_api.errors import StoreWriteError, UnsupportedFormatError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetRequest:
    """One asset column of a submission.

    ``column`` is the record attribute the resulting path is stored in and
    ``banner_suffix`` appends ``_banner`` to the stored file name.
    """

    column: str
    payload: Optional[str]
    remove: bool = False
    banner_suffix: bool = False

    @property
    def has_payload(self) -> bool:
        return bool(self.payload)


class AssetIngestor:
    def __init__(
        self,
        store: AssetStore,
        *,
        category: str,
        write_timeout_seconds: float,
    ) -> None:
        self._store = store
        self._category = category
        self._write_timeout_seconds = write_timeout_seconds

    @property
    def store(self) -> AssetStore:
        return self._store

    async def ingest(self, slug: str, requests: Sequence[AssetRequest]) -> dict[str, Optional[str]]:
        """Store new assets and return only the columns whose path changed.

        The first failing field aborts the remaining fields. Files already
        written for earlier fields stay on disk.
        """

        changes: dict[str, Optional[str]] = {}
        for request in requests:
            if request.remove:
                if request.has_payload:
                    LOGGER.info(
                        "Ignoring uploaded %s for %s because removal was requested",
                        request.column,
                        slug,
                    )
                changes[request.column] = None
                continue
            if not request.has_payload:
                continue
            changes[request.column] = await self._store_payload(slug, request)
        return changes

    async def _store_payload(self, slug: str, request: AssetRequest) -> str:
        field = request.column
        data = decode_data_url(request.payload or "", field=field)
        extension = sniff_extension(data)
        if extension == UNKNOWN_EXTENSION:
            LOGGER.warning("%s for %s has an unknown file extension", field.capitalize(), slug)
            raise UnsupportedFormatError(
                f"{field.capitalize()}'s file extension is unknown/not valid.",
                field=field,
            )
        relative_path = asset_relative_path(
            self._category,
            slug,
            extension,
            banner=request.banner_suffix,
        )
        write = asyncio.ensure_future(
            asyncio.to_thread(self._store.write, relative_path, data, field=field)
        )
        try:
            await asyncio.wait_for(asyncio.shield(write), timeout=self._write_timeout_seconds)
        except asyncio.TimeoutError as exc:
            LOGGER.warning("Timed out writing %s to %s", field, relative_path)
            write.add_done_callback(lambda done: self._discard_late_write(done, relative_path))
            raise StoreWriteError(
                f"Timed out writing {field} to disk.",
                field=field,
                path=relative_path,
                retryable=True,
            ) from exc
        return relative_path

    def _discard_late_write(self, write: asyncio.Future, relative_path: str) -> None:
        """Delete a file whose write finished after the caller was told it failed."""

        if write.cancelled() or write.exception() is not None:
            return
        try:
            self._store.delete(relative_path)
        except OSError as exc:
            LOGGER.warning("Failed to remove late write %s: %s", relative_path, exc)
            return
        LOGGER.info("Removed late write %s", relative_path)


__all__ = ["AssetIngestor", "AssetRequest"]
