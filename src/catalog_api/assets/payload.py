"""Codec for the ``<prefix>,<base64>`` strings carried in submissions."""

from __future__ import annotations

import base64
import binascii

from catalog_api.errors import AssetDecodeError

DEFAULT_MIME_TYPE = "application/octet-stream"


def encode_data_url(data: bytes, mime_type: str | None = None) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or DEFAULT_MIME_TYPE};base64,{encoded}"


def decode_data_url(value: str, *, field: str) -> bytes:
    """Strip everything up to the first comma and base64-decode the rest."""

    _, separator, encoded = value.partition(",")
    if not separator:
        raise AssetDecodeError(
            f"Unable to process {field}'s Base64 data: missing data URL prefix.",
            field=field,
        )
    try:
        data = base64.b64decode(encoded.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise AssetDecodeError(
            f"Unable to process {field}'s Base64 data.",
            field=field,
        ) from exc
    if not data:
        raise AssetDecodeError(f"{field.capitalize()} payload is empty.", field=field)
    return data


__all__ = ["DEFAULT_MIME_TYPE", "decode_data_url", "encode_data_url"]
