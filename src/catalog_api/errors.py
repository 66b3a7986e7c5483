"""Error taxonomy shared by the catalog services, HTTP layer and client.

Every failure a submission can end in is a :class:`CatalogError` subclass with
a stable ``error`` code. The HTTP layer serialises the code, and the client
maps it back to the same class, so callers can branch on the type instead of
inspecting message text.
"""

from __future__ import annotations

from typing import Any, Optional


class CatalogError(Exception):
    """Base class for every error surfaced by the catalog core."""

    error: str = "catalog_error"
    status_code: int = 500
    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        error: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error is not None:
            self.error = error
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class SubmissionValidationError(CatalogError):
    """The submission was rejected before any mutation took place."""

    error = "invalid_payload"
    status_code = 400


class RecordNotFoundError(CatalogError):
    error = "not_found"
    status_code = 404

    def __init__(self, kind: str, key: object) -> None:
        super().__init__(
            f"{kind.capitalize()} '{key}' was not found.",
            details={"kind": kind, "key": str(key)},
        )


class AssetError(CatalogError):
    """Failure while handling an uploaded icon or banner."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        error: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        merged = dict(details or {})
        if field is not None:
            merged.setdefault("field", field)
        super().__init__(message, error=error, details=merged)
        self.field = field


class AssetDecodeError(AssetError):
    error = "asset_decode_failed"
    status_code = 422


class UnsupportedFormatError(AssetError):
    error = "unsupported_format"
    status_code = 415


class StoreWriteError(AssetError):
    error = "asset_write_failed"
    status_code = 500

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        path: Optional[str] = None,
        retryable: bool = False,
    ) -> None:
        details: dict[str, Any] = {"path": path} if path else {}
        if retryable:
            details["retryable"] = True
        super().__init__(message, field=field, details=details)
        self.path = path
        self.retryable = retryable


class AssetUpdateError(AssetError):
    """The asset file was written but the record could not be pointed at it."""

    error = "asset_update_failed"
    status_code = 500


class PersistenceConflictError(CatalogError):
    error = "persistence_conflict"
    status_code = 409


_ERRORS_BY_CODE: dict[str, type[CatalogError]] = {
    "invalid_payload": SubmissionValidationError,
    "invalid_slug": SubmissionValidationError,
    "invalid_relations": SubmissionValidationError,
    "not_found": RecordNotFoundError,
    "asset_decode_failed": AssetDecodeError,
    "unsupported_format": UnsupportedFormatError,
    "asset_write_failed": StoreWriteError,
    "asset_update_failed": AssetUpdateError,
    "persistence_conflict": PersistenceConflictError,
}


def error_class_for(code: str) -> Optional[type[CatalogError]]:
    return _ERRORS_BY_CODE.get(code)


def error_from_payload(payload: dict[str, Any]) -> Optional[CatalogError]:
    """Rebuild a typed error from an HTTP error body, if the code is known."""

    code = payload.get("error")
    if not isinstance(code, str):
        return None
    cls = error_class_for(code)
    if cls is None:
        return None
    message = str(payload.get("message") or code)
    details = payload.get("details") if isinstance(payload.get("details"), dict) else {}
    error = CatalogError.__new__(cls)
    CatalogError.__init__(error, message, error=code, details=details)
    error.retryable = bool(details.get("retryable", cls.retryable))
    if isinstance(error, AssetError):
        error.field = details.get("field")
    if isinstance(error, StoreWriteError):
        error.path = details.get("path")
    return error


__all__ = [
    "AssetDecodeError",
    "AssetError",
    "AssetUpdateError",
    "CatalogError",
    "PersistenceConflictError",
    "RecordNotFoundError",
    "StoreWriteError",
    "SubmissionValidationError",
    "UnsupportedFormatError",
    "error_class_for",
    "error_from_payload",
]
