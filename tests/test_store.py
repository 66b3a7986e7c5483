from pathlib import Path

import pytest

from catalog_api.assets.store import (
    MODS_CATEGORY,
    SOURCES_CATEGORY,
    AssetStore,
    asset_relative_path,
)
from catalog_api.errors import StoreWriteError


def test_relative_paths():
    assert asset_relative_path(MODS_CATEGORY, "my-mod", "png") == "images/mods/my-mod.png"
    assert (
        asset_relative_path(SOURCES_CATEGORY, "src", "jpg", banner=True)
        == "images/source/src_banner.jpg"
    )


def test_write_overwrites_existing_file(store: AssetStore, public_dir: Path):
    store.write("images/source/a.png", b"first")
    store.write("images/source/a.png", b"second")
    assert (public_dir / "images" / "source" / "a.png").read_bytes() == b"second"


def test_write_does_not_create_directories(tmp_path: Path):
    store = AssetStore(tmp_path / "missing-root")
    with pytest.raises(StoreWriteError) as excinfo:
        store.write("images/mods/a.png", b"data", field="banner")
    assert excinfo.value.field == "banner"
    assert excinfo.value.path == "images/mods/a.png"
    assert "writing banner to disk" in excinfo.value.message
    assert not (tmp_path / "missing-root").exists()


@pytest.mark.parametrize("path", ["../escape.png", "/etc/passwd", "images/../../x.png", ""])
def test_paths_outside_root_are_rejected(store: AssetStore, path: str):
    with pytest.raises(StoreWriteError):
        store.write(path, b"data")


def test_list_and_delete(store: AssetStore):
    store.write("images/mods/one.png", b"1")
    store.write("images/mods/two.jpg", b"2")
    assert list(store.list_files(MODS_CATEGORY)) == [
        "images/mods/one.png",
        "images/mods/two.jpg",
    ]
    assert store.delete("images/mods/one.png") is True
    assert store.delete("images/mods/one.png") is False
    assert not store.exists("images/mods/one.png")


def test_unwritable_categories(tmp_path: Path):
    root = tmp_path / "public"
    (root / MODS_CATEGORY).mkdir(parents=True)
    (root / "images" / "source").write_text("not a directory")
    assert AssetStore(root).unwritable_categories() == [SOURCES_CATEGORY]


def test_prepared_public_dir_is_writable(store: AssetStore):
    assert store.unwritable_categories() == []
