"""Asset decoding, type sniffing and storage."""

from .payload import decode_data_url, encode_data_url
from .sniffer import UNKNOWN_EXTENSION, sniff_extension
from .store import (
    ASSET_CATEGORIES,
    MODS_CATEGORY,
    SOURCES_CATEGORY,
    AssetStore,
    asset_relative_path,
)

__all__ = [
    "ASSET_CATEGORIES",
    "AssetStore",
    "MODS_CATEGORY",
    "SOURCES_CATEGORY",
    "UNKNOWN_EXTENSION",
    "asset_relative_path",
    "decode_data_url",
    "encode_data_url",
    "sniff_extension",
]
