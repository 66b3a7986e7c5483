"""Magic-number based image type detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

UNKNOWN_EXTENSION = "unknown"

# Longest prefix any signature needs; nothing past it is ever inspected.
SNIFF_PREFIX_LENGTH = 12


@dataclass(frozen=True)
class Signature:
    extension: str
    pattern: tuple[Optional[int], ...]

    def matches(self, prefix: bytes) -> bool:
        if len(prefix) < len(self.pattern):
            return False
        return all(
            expected is None or prefix[index] == expected
            for index, expected in enumerate(self.pattern)
        )


def _sig(extension: str, *parts: bytes | int) -> Signature:
    """Build a signature; an int part stands for that many wildcard bytes."""

    pattern: list[Optional[int]] = []
    for part in parts:
        if isinstance(part, int):
            pattern.extend([None] * part)
        else:
            pattern.extend(part)
    if len(pattern) > SNIFF_PREFIX_LENGTH:
        raise ValueError(f"signature for {extension} exceeds the sniff prefix")
    return Signature(extension=extension, pattern=tuple(pattern))


SIGNATURES: tuple[Signature, ...] = (
    _sig("png", b"\x89PNG\r\n\x1a\n"),
    _sig("jpg", b"\xff\xd8\xff"),
    _sig("gif", b"GIF87a"),
    _sig("gif", b"GIF89a"),
    _sig("webp", b"RIFF", 4, b"WEBP"),
    _sig("avif", 4, b"ftypavif"),
    _sig("tiff", b"II*\x00"),
    _sig("tiff", b"MM\x00*"),
    _sig("ico", b"\x00\x00\x01\x00"),
    _sig("bmp", b"BM"),
)


def sniff_extension(data: bytes) -> str:
    """Return the file extension matching ``data``'s leading bytes.

    Returns ``"unknown"`` for empty, truncated or unrecognised input.
    """

    if not data:
        return UNKNOWN_EXTENSION
    prefix = bytes(data[:SNIFF_PREFIX_LENGTH])
    for signature in SIGNATURES:
        if signature.matches(prefix):
            return signature.extension
    return UNKNOWN_EXTENSION


__all__ = ["SIGNATURES", "SNIFF_PREFIX_LENGTH", "Signature", "UNKNOWN_EXTENSION", "sniff_extension"]
