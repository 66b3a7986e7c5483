"""HTTP client for the catalog API."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote, urlencode, urljoin

import requests
from requests import Response

from catalog_api.config.settings import get_client_settings
from catalog_api.errors import (
    AssetDecodeError,
    CatalogError,
    UnsupportedFormatError,
    error_from_payload,
)
from catalog_api.models.category import Category, CategorySubmission
from catalog_api.models.mod import Mod, ModSubmission
from catalog_api.models.source import Source, SourceSubmission

LOGGER = logging.getLogger(__name__)


class CatalogClientError(Exception):
    """Transport failure or an error response without a known error code."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CatalogClient:
    def __init__(self, *, base_url: str, timeout_seconds: int) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls) -> CatalogClient:
        settings = get_client_settings()
        return cls(base_url=settings.base_url, timeout_seconds=int(settings.timeout_seconds))

    def get_source(self, url: str) -> Source:
        return Source.from_dict(self._request_json("GET", f"/api/v1/sources/{quote(url, safe='')}"))

    def list_sources(self) -> list[Source]:
        return [Source.from_dict(item) for item in self._request_json("GET", "/api/v1/sources")]

    def add_source(self, submission: SourceSubmission) -> Source:
        payload = self._request_json("POST", "/api/v1/sources", json_body=submission.to_dict())
        return Source.from_dict(payload)

    def get_mod(self, url: str) -> Mod:
        return Mod.from_dict(self._request_json("GET", f"/api/v1/mods/{quote(url, safe='')}"))

    def list_mods(
        self,
        *,
        url: str | None = None,
        offset: int | None = None,
        count: int | None = None,
    ) -> list[Mod]:
        params = {"url": url, "offset": offset, "count": count}
        return [Mod.from_dict(item) for item in self._request_json("GET", "/api/v1/mods", params=params)]

    def add_mod(self, submission: ModSubmission) -> Mod:
        return Mod.from_dict(self._request_json("POST", "/api/v1/mods", json_body=submission.to_dict()))

    def list_categories(self) -> list[Category]:
        return [Category.from_dict(item) for item in self._request_json("GET", "/api/v1/categories")]

    def add_category(self, submission: CategorySubmission) -> Category:
        payload = self._request_json("POST", "/api/v1/categories", json_body=submission.to_dict())
        return Category.from_dict(payload)

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, object] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        response = self._request(method, path, params=params, json_body=json_body)
        if not response.content:
            return {}
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise CatalogClientError("Catalog API returned invalid JSON.") from exc

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, object] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Response:
        url = self._build_url(path, params=params)
        try:
            response = requests.request(
                method,
                url,
                headers={"Accept": "application/json"},
                json=json_body,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise CatalogClientError(str(exc)) from exc
        if response.status_code >= 400:
            self._raise_for_status(response)
        return response

    def _build_url(self, path: str, *, params: dict[str, object] | None = None) -> str:
        url = urljoin(f"{self._base_url}/", path.lstrip("/"))
        if params:
            query = urlencode({key: value for key, value in params.items() if value is not None})
            if query:
                return f"{url}?{query}"
        return url

    @staticmethod
    def _raise_for_status(response: Response) -> None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            # FastAPI wraps HTTPException payloads in "detail".
            payload = body.get("detail") if isinstance(body.get("detail"), dict) else body
            error = error_from_payload(payload)
            if error is not None:
                LOGGER.debug("Catalog API returned %s: %s", error.error, error.message)
                raise error
        raise CatalogClientError(
            f"Catalog request failed with status {response.status_code}.",
            status_code=response.status_code,
        )


def describe_error(exc: BaseException) -> str:
    """Short, human-readable text for an error raised by a submission."""

    if isinstance(exc, CatalogError):
        if exc.error == "invalid_slug":
            kind = str(exc.details.get("kind") or "entry").capitalize()
            return f"{kind} URL is too short or empty (<2 bytes)."
        if isinstance(exc, UnsupportedFormatError):
            return exc.message
        if isinstance(exc, AssetDecodeError):
            return "Icon or banner file(s) corrupt/invalid."
        if exc.error == "invalid_relations":
            return exc.message
    return "Unable to create or edit entry!"


__all__ = ["CatalogClient", "CatalogClientError", "describe_error"]
