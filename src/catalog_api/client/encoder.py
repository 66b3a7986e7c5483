"""Turns the files a contributor selected into data URLs before submitting."""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, Optional

from catalog_api.assets.payload import DEFAULT_MIME_TYPE, encode_data_url
from catalog_api.config.settings import get_settings

LOGGER = logging.getLogger(__name__)

FileLoader = Callable[[Path], Awaitable[bytes]]


@dataclass
class EncodedAssets:
    """Data URLs produced for one submission; ``None`` means nothing to send."""

    icon: Optional[str] = None
    banner: Optional[str] = None
    failed: list[str] = field(default_factory=list)
    timed_out: list[str] = field(default_factory=list)


async def read_file(path: Path) -> bytes:
    return await asyncio.to_thread(path.read_bytes)


def guess_mime_type(path: Path) -> str:
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or DEFAULT_MIME_TYPE


async def _encode(path: Path, loader: FileLoader) -> str:
    data = await loader(path)
    return encode_data_url(data, guess_mime_type(path))


async def encode_files(
    *,
    icon: Optional[Path] = None,
    banner: Optional[Path] = None,
    timeout_seconds: Optional[float] = None,
    poll_interval_seconds: Optional[float] = None,
    loader: FileLoader = read_file,
) -> EncodedAssets:
    """Encode every selected file concurrently, waiting at most ``timeout_seconds``.

    Files that fail to read, or are still being read when the deadline passes,
    are left as ``None`` so the submission can proceed without them.
    """

    settings = get_settings()
    timeout = timeout_seconds if timeout_seconds is not None else settings.encode_timeout_seconds
    interval = (
        poll_interval_seconds
        if poll_interval_seconds is not None
        else settings.encode_poll_interval_seconds
    )

    result = EncodedAssets()
    tasks: dict[asyncio.Task[str], str] = {}
    for name, path in (("icon", icon), ("banner", banner)):
        if path is not None:
            tasks[asyncio.create_task(_encode(path, loader), name=f"encode-{name}")] = name
    if not tasks:
        return result

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    pending = set(tasks)
    while pending:
        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        _, pending = await asyncio.wait(pending, timeout=min(interval, remaining))
        if pending:
            LOGGER.debug("Encoding progress %d/%d", len(tasks) - len(pending), len(tasks))

    for task in pending:
        task.cancel()
        result.timed_out.append(tasks[task])
        LOGGER.warning("Encoding %s did not finish within %.1fs; submitting without it", tasks[task], timeout)
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)

    for task, name in tasks.items():
        if task.cancelled():
            continue
        exc = task.exception()
        if exc is not None:
            result.failed.append(name)
            LOGGER.warning("Unable to read %s file: %s", name, exc)
            continue
        setattr(result, name, task.result())
    return result


__all__ = ["EncodedAssets", "FileLoader", "encode_files", "guess_mime_type", "read_file"]
