"""Filesystem writer for public image assets."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Iterator

from catalog_api.errors import StoreWriteError

LOGGER = logging.getLogger(__name__)

MODS_CATEGORY = "images/mods"
SOURCES_CATEGORY = "images/source"
ASSET_CATEGORIES = (MODS_CATEGORY, SOURCES_CATEGORY)


def asset_relative_path(category: str, slug: str, extension: str, *, banner: bool = False) -> str:
    suffix = "_banner" if banner else ""
    return f"{category}/{slug}{suffix}.{extension}"


class AssetStore:
    """Writes asset bytes below a public root that already exists.

    Directories are never created here; the deployment provides
    ``images/mods`` and ``images/source`` under the root.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, relative_path: str) -> Path:
        relative = PurePosixPath(relative_path)
        if relative.is_absolute() or ".." in relative.parts or not relative.parts:
            raise StoreWriteError(
                f"Refusing to write outside the public directory: {relative_path!r}",
                path=relative_path,
            )
        return self._root.joinpath(*relative.parts)

    def unwritable_categories(self) -> list[str]:
        """Return the asset directories that are missing or not writable."""

        problems = []
        for category in ASSET_CATEGORIES:
            directory = self.resolve(category)
            if not directory.is_dir() or not os.access(directory, os.W_OK):
                problems.append(category)
        return problems

    def write(self, relative_path: str, data: bytes, *, field: str | None = None) -> Path:
        target = self.resolve(relative_path)
        label = field or "asset"
        try:
            with target.open("wb") as handle:
                handle.write(data)
        except OSError as exc:
            LOGGER.warning("Error writing %s to disk at %s: %s", label, target, exc)
            raise StoreWriteError(
                f"Error writing {label} to disk: {exc.strerror or exc}",
                field=field,
                path=relative_path,
            ) from exc
        LOGGER.info("Wrote %s (%d bytes) to %s", label, len(data), target)
        return target

    def exists(self, relative_path: str) -> bool:
        return self.resolve(relative_path).is_file()

    def delete(self, relative_path: str) -> bool:
        target = self.resolve(relative_path)
        if not target.is_file():
            return False
        target.unlink()
        return True

    def list_files(self, category: str) -> Iterator[str]:
        directory = self.resolve(category)
        if not directory.is_dir():
            return
        for path in sorted(directory.iterdir()):
            if path.is_file():
                yield f"{category}/{path.name}"


__all__ = [
    "ASSET_CATEGORIES",
    "AssetStore",
    "MODS_CATEGORY",
    "SOURCES_CATEGORY",
    "asset_relative_path",
]
