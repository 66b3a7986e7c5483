import pytest
import requests

from catalog_api.client.api_client import CatalogClient, CatalogClientError, describe_error
from catalog_api.errors import (
    AssetDecodeError,
    PersistenceConflictError,
    StoreWriteError,
    SubmissionValidationError,
    UnsupportedFormatError,
    error_from_payload,
)
from catalog_api.models.source import SourceSubmission


class _FakeResponse:
    def __init__(self, status_code: int, payload=None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.content = b"" if payload is None else b"{}"

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload


@pytest.fixture
def api():
    return CatalogClient(base_url="http://catalog.test/", timeout_seconds=5)


def _respond(monkeypatch, response: _FakeResponse, calls: list | None = None) -> None:
    def fake_request(method, url, **kwargs):
        if calls is not None:
            calls.append((method, url, kwargs))
        return response

    monkeypatch.setattr(requests, "request", fake_request)


def test_add_source_posts_aliased_payload(api, monkeypatch):
    calls: list = []
    _respond(monkeypatch, _FakeResponse(200, {"url": "hub", "name": "Hub"}), calls)

    source = api.add_source(SourceSubmission(name="Hub", url="hub", iremove=True))

    assert source.url == "hub"
    method, url, kwargs = calls[0]
    assert (method, url) == ("POST", "http://catalog.test/api/v1/sources")
    assert kwargs["json"]["iremove"] is True
    assert kwargs["timeout"] == 5


def test_list_mods_drops_empty_params(api, monkeypatch):
    calls: list = []
    _respond(monkeypatch, _FakeResponse(200, []), calls)
    api.list_mods(offset=10)
    assert calls[0][1] == "http://catalog.test/api/v1/mods?offset=10"


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("invalid_slug", SubmissionValidationError),
        ("asset_decode_failed", AssetDecodeError),
        ("unsupported_format", UnsupportedFormatError),
        ("asset_write_failed", StoreWriteError),
        ("persistence_conflict", PersistenceConflictError),
    ],
)
def test_error_codes_map_back_to_taxonomy(api, monkeypatch, code, expected):
    detail = {"error": code, "message": "boom", "details": {"field": "banner"}}
    _respond(monkeypatch, _FakeResponse(400, {"detail": detail}))
    with pytest.raises(expected) as excinfo:
        api.get_source("hub")
    assert excinfo.value.error == code
    assert excinfo.value.message == "boom"


def test_unknown_error_code_is_a_client_error(api, monkeypatch):
    _respond(monkeypatch, _FakeResponse(502, {"detail": {"error": "bad_gateway", "message": "x"}}))
    with pytest.raises(CatalogClientError) as excinfo:
        api.list_sources()
    assert excinfo.value.status_code == 502


def test_transport_failure_is_a_client_error(api, monkeypatch):
    def fail(method, url, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(requests, "request", fail)
    with pytest.raises(CatalogClientError):
        api.list_categories()


def test_rebuilt_asset_errors_keep_field():
    error = error_from_payload(
        {"error": "asset_write_failed", "message": "m", "details": {"field": "icon", "path": "p"}}
    )
    assert isinstance(error, StoreWriteError)
    assert error.field == "icon"
    assert error.path == "p"
    assert error.retryable is False


def test_rebuilt_write_timeout_stays_retryable():
    original = StoreWriteError("Timed out writing icon to disk.", field="icon", path="p", retryable=True)
    error = error_from_payload(original.to_dict())
    assert isinstance(error, StoreWriteError)
    assert error.retryable is True
    assert error.path == "p"


def test_describe_error_messages():
    slug_error = SubmissionValidationError(
        "Error parsing URL", error="invalid_slug", details={"kind": "source"}
    )
    assert describe_error(slug_error) == "Source URL is too short or empty (<2 bytes)."
    unsupported = UnsupportedFormatError("Icon's file extension is unknown/not valid.", field="icon")
    assert describe_error(unsupported) == "Icon's file extension is unknown/not valid."
    assert describe_error(AssetDecodeError("bad", field="banner")) == "Icon or banner file(s) corrupt/invalid."
    assert describe_error(RuntimeError("x")) == "Unable to create or edit entry!"
