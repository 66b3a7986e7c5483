"""Database model package."""

from .category import CategoryRecord
from .mod import ModDownloadRecord, ModRecord, ModScreenshotRecord, ModSourceRecord
from .source import SourceRecord

__all__ = [
    "CategoryRecord",
    "ModDownloadRecord",
    "ModRecord",
    "ModScreenshotRecord",
    "ModSourceRecord",
    "SourceRecord",
]
