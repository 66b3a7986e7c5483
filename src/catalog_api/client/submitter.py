"""Encode-then-submit coordination with an in-flight guard per entity."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar

from catalog_api.client.concurrency import ConcurrencyGuard
from catalog_api.client.encoder import EncodedAssets, FileLoader, encode_files, read_file

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

SubmitCallable = Callable[[EncodedAssets], Awaitable[T]]


class SubmissionInFlightError(RuntimeError):
    """A submission for the same entity is still outstanding."""

    def __init__(self, kind: str, slug: str) -> None:
        super().__init__(f"A {kind} submission for '{slug}' is already in progress.")
        self.kind = kind
        self.slug = slug


class SubmissionCoordinator:
    def __init__(
        self,
        *,
        timeout_seconds: Optional[float] = None,
        poll_interval_seconds: Optional[float] = None,
        loader: FileLoader = read_file,
        guard: Optional[ConcurrencyGuard] = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._poll_interval_seconds = poll_interval_seconds
        self._loader = loader
        self._guard = guard or ConcurrencyGuard()

    @property
    def guard(self) -> ConcurrencyGuard:
        return self._guard

    async def submit(
        self,
        kind: str,
        slug: str,
        submit: SubmitCallable[T],
        *,
        icon: Optional[Path] = None,
        banner: Optional[Path] = None,
    ) -> T:
        """Encode the selected files, then call ``submit`` exactly once."""

        key = f"{kind}:{slug}"
        async with self._guard.acquire(key) as accepted:
            if not accepted:
                LOGGER.warning("Rejected duplicate %s submission for %s", kind, slug)
                raise SubmissionInFlightError(kind, slug)
            assets = await encode_files(
                icon=icon,
                banner=banner,
                timeout_seconds=self._timeout_seconds,
                poll_interval_seconds=self._poll_interval_seconds,
                loader=self._loader,
            )
            return await submit(assets)


__all__ = ["SubmissionCoordinator", "SubmissionInFlightError", "SubmitCallable"]
