import pytest

from catalog_api.assets.payload import decode_data_url, encode_data_url
from catalog_api.errors import AssetDecodeError


def test_encode_then_decode_round_trips():
    data = bytes(range(256)) * 3
    assert decode_data_url(encode_data_url(data, "image/png"), field="icon") == data


def test_encode_defaults_to_octet_stream():
    assert encode_data_url(b"abc").startswith("data:application/octet-stream;base64,")


def test_decode_ignores_prefix_contents():
    assert decode_data_url("whatever-prefix,aGVsbG8=", field="banner") == b"hello"


def test_decode_without_comma_raises():
    with pytest.raises(AssetDecodeError) as excinfo:
        decode_data_url("aGVsbG8=", field="icon")
    assert excinfo.value.field == "icon"
    assert excinfo.value.error == "asset_decode_failed"


def test_decode_invalid_base64_raises():
    with pytest.raises(AssetDecodeError) as excinfo:
        decode_data_url("data:image/png;base64,@@not-base64@@", field="banner")
    assert excinfo.value.details["field"] == "banner"


def test_decode_empty_payload_raises():
    with pytest.raises(AssetDecodeError):
        decode_data_url("data:image/png;base64,", field="icon")
