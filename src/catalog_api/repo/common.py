from __future__ import annotations

from typing import Any, Mapping, TypeVar

T = TypeVar("T")


def _assign(record: T, fields: Mapping[str, Any]) -> T:
    for name, value in fields.items():
        setattr(record, name, value)
    return record
