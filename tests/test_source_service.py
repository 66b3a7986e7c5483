from pathlib import Path

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from catalog_api.db.models import SourceRecord
from catalog_api.errors import (
    AssetDecodeError,
    AssetUpdateError,
    RecordNotFoundError,
    StoreWriteError,
    SubmissionValidationError,
    UnsupportedFormatError,
)
from catalog_api.models.source import SourceSubmission

from conftest import JPEG_BYTES, PNG_BYTES, TEXT_BYTES, data_url


def _count_sources(session_factory) -> int:
    with session_factory() as session:
        return session.execute(select(func.count()).select_from(SourceRecord)).scalar_one()


@pytest.mark.asyncio
async def test_upsert_creates_then_updates(services, session_factory):
    created = await services.sources.add_source(SourceSubmission(name="Mod Hub", url="modhub"))
    assert created.name == "Mod Hub"
    assert created.icon is None and created.banner is None

    updated = await services.sources.add_source(
        SourceSubmission(name="Mod Hub 2", url="modhub", classes="highlight")
    )
    assert updated.name == "Mod Hub 2"
    assert updated.classes == "highlight"
    assert _count_sources(session_factory) == 1


@pytest.mark.asyncio
async def test_short_slug_is_rejected_before_any_side_effect(services, session_factory, public_dir: Path):
    with pytest.raises(SubmissionValidationError) as excinfo:
        await services.sources.add_source(
            SourceSubmission(name="X", url="x", icon=data_url(PNG_BYTES))
        )
    assert excinfo.value.error == "invalid_slug"
    assert "Error parsing URL" in excinfo.value.message
    assert _count_sources(session_factory) == 0
    assert list((public_dir / "images" / "source").iterdir()) == []


@pytest.mark.asyncio
async def test_icon_and_banner_are_written_and_recorded(services, public_dir: Path):
    source = await services.sources.add_source(
        SourceSubmission(
            name="Mod Hub",
            url="modhub",
            icon=data_url(PNG_BYTES),
            banner=data_url(JPEG_BYTES, "image/jpeg"),
        )
    )
    assert source.icon == "images/source/modhub.png"
    assert source.banner == "images/source/modhub_banner.jpg"
    assert (public_dir / source.icon).read_bytes() == PNG_BYTES
    assert (public_dir / source.banner).read_bytes() == JPEG_BYTES
    assert services.sources.get_source("modhub").icon == source.icon


@pytest.mark.asyncio
async def test_removal_wins_over_payload_and_is_idempotent(services, public_dir: Path):
    await services.sources.add_source(
        SourceSubmission(name="Hub", url="hub", icon=data_url(PNG_BYTES))
    )
    (public_dir / "images" / "source" / "hub.png").unlink()

    for _ in range(2):
        source = await services.sources.add_source(
            SourceSubmission(name="Hub", url="hub", icon=data_url(PNG_BYTES), iremove=True)
        )
        assert source.icon is None

    assert not (public_dir / "images" / "source" / "hub.png").exists()


@pytest.mark.asyncio
async def test_unknown_format_leaves_path_unchanged(services, public_dir: Path):
    await services.sources.add_source(
        SourceSubmission(name="Hub", url="hub", icon=data_url(PNG_BYTES))
    )
    with pytest.raises(UnsupportedFormatError) as excinfo:
        await services.sources.add_source(
            SourceSubmission(name="Hub renamed", url="hub", icon=data_url(TEXT_BYTES, "text/plain"))
        )
    assert excinfo.value.field == "icon"
    assert "file extension is unknown" in excinfo.value.message

    source = services.sources.get_source("hub")
    # Primary fields were committed before asset handling began.
    assert source.name == "Hub renamed"
    assert source.icon == "images/source/hub.png"


@pytest.mark.asyncio
async def test_first_failing_field_aborts_remaining_fields(services, public_dir: Path):
    with pytest.raises(AssetDecodeError):
        await services.sources.add_source(
            SourceSubmission(
                name="Hub",
                url="hub",
                icon="not a data url",
                banner=data_url(PNG_BYTES),
            )
        )
    assert list((public_dir / "images" / "source").iterdir()) == []
    assert services.sources.get_source("hub").banner is None


@pytest.mark.asyncio
async def test_missing_asset_directory_is_a_store_write_error(services, public_dir: Path):
    (public_dir / "images" / "source").rmdir()
    with pytest.raises(StoreWriteError) as excinfo:
        await services.sources.add_source(
            SourceSubmission(name="Hub", url="hub", banner=data_url(PNG_BYTES))
        )
    assert excinfo.value.field == "banner"
    assert excinfo.value.path == "images/source/hub_banner.png"


@pytest.mark.asyncio
async def test_asset_update_failure_leaves_dangling_file(services, public_dir: Path, monkeypatch):
    def locked(*args, **kwargs):
        raise OperationalError("UPDATE sources", {}, Exception("database is locked"))

    monkeypatch.setattr(services.sources._repo, "update", locked)
    with pytest.raises(AssetUpdateError) as excinfo:
        await services.sources.add_source(
            SourceSubmission(name="Hub", url="hub", icon=data_url(PNG_BYTES))
        )
    assert excinfo.value.field == "icon"
    assert excinfo.value.details["paths"] == {"icon": "images/source/hub.png"}
    # The file is on disk but the record never learned its path.
    assert (public_dir / "images" / "source" / "hub.png").read_bytes() == PNG_BYTES
    assert services.sources.get_source("hub").icon is None


def test_get_missing_source_raises(services):
    with pytest.raises(RecordNotFoundError):
        services.sources.get_source("nope")


@pytest.mark.asyncio
async def test_list_sources(services):
    await services.sources.add_source(SourceSubmission(name="Beta", url="beta"))
    await services.sources.add_source(SourceSubmission(name="Alpha", url="alpha"))
    assert [source.url for source in services.sources.list_sources()] == ["alpha", "beta"]
