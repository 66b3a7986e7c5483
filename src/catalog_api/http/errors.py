"""Shared error helpers for HTTP APIs."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import HTTPException, status

from catalog_api.errors import CatalogError
from catalog_api.models.error import Error

LOGGER = logging.getLogger(__name__)

_STATUS_ERROR_CODES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_409_CONFLICT: "conflict",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "internal_error",
}


def error_payload(
    message: str,
    *,
    error: Optional[str] = None,
    status_code: Optional[int] = None,
    details: Optional[dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> dict[str, Any]:
    resolved_error = error or _STATUS_ERROR_CODES.get(status_code or 0, "error")
    return Error(
        error=resolved_error,
        message=message,
        request_id=request_id,
        details=details,
    ).model_dump(by_alias=True, exclude_none=True)


def http_error(
    status_code: int,
    message: str,
    *,
    error: Optional[str] = None,
    details: Optional[dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> HTTPException:
    payload = error_payload(
        message,
        error=error,
        status_code=status_code,
        details=details,
        request_id=request_id,
    )
    return HTTPException(status_code=status_code, detail=payload)


def http_error_for(exc: CatalogError) -> HTTPException:
    """Translate a catalog error into an HTTP error carrying its stable code."""

    if exc.status_code >= 500:
        LOGGER.error("%s: %s", exc.error, exc.message)
    return http_error(
        exc.status_code,
        exc.message,
        error=exc.error,
        details=exc.details or None,
    )


__all__ = ["error_payload", "http_error", "http_error_for"]
