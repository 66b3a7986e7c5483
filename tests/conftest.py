import os

# Keep the module-level engine away from the developer database.
os.environ.setdefault("CATALOG_DATABASE_URL", "sqlite:///:memory:")

import base64  # noqa: E402
from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from catalog_api.assets.store import MODS_CATEGORY, SOURCES_CATEGORY, AssetStore  # noqa: E402
from catalog_api.config.settings import CatalogSettings  # noqa: E402
from catalog_api.db import Base, create_catalog_engine, create_session_factory  # noqa: E402
from catalog_api.service import facade  # noqa: E402
from catalog_api.service.facade import CatalogServiceFacade  # noqa: E402

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x01" * 16
GIF_BYTES = b"GIF89a" + b"\x01\x00\x01\x00" + b"\x00" * 8
TEXT_BYTES = b"just some text, not an image"


def data_url(data: bytes, mime_type: str = "image/png") -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    root = tmp_path / "public"
    (root / MODS_CATEGORY).mkdir(parents=True)
    (root / SOURCES_CATEGORY).mkdir(parents=True)
    return root


@pytest.fixture
def settings(public_dir: Path) -> CatalogSettings:
    return CatalogSettings(public_dir=public_dir, asset_write_timeout_seconds=5.0)


@pytest.fixture
def store(public_dir: Path) -> AssetStore:
    return AssetStore(public_dir)


@pytest.fixture
def session_factory(tmp_path: Path):
    engine = create_catalog_engine(f"sqlite:///{(tmp_path / 'catalog.db').as_posix()}")
    Base.metadata.create_all(engine)
    try:
        yield create_session_factory(engine)
    finally:
        engine.dispose()


@pytest.fixture
def services(session_factory, settings, store) -> CatalogServiceFacade:
    return CatalogServiceFacade(session_factory=session_factory, settings=settings, store=store)


@pytest.fixture
def client(services, monkeypatch) -> TestClient:
    from catalog_api.main import app

    monkeypatch.setattr(facade, "get_catalog_services", lambda: services)
    return TestClient(app)
