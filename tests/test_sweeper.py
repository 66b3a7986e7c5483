from pathlib import Path

import pytest

from catalog_api.models.mod import ModSubmission
from catalog_api.models.source import SourceSubmission
from catalog_api.service.sweeper import AssetSweeper

from conftest import PNG_BYTES, data_url


@pytest.mark.asyncio
async def test_sweep_removes_only_unreferenced_files(services, session_factory, store, public_dir: Path):
    await services.sources.add_source(
        SourceSubmission(name="Hub", url="hub", icon=data_url(PNG_BYTES))
    )
    await services.mods.add_mod(
        ModSubmission(name="Mod", url="some-mod", banner=data_url(PNG_BYTES))
    )
    store.write("images/source/stale_banner.gif", b"GIF89a")
    store.write("images/mods/old-mod.png", PNG_BYTES)

    sweeper = AssetSweeper(store, session_factory=session_factory)

    assert sweeper.sweep(dry_run=True) == ["images/mods/old-mod.png", "images/source/stale_banner.gif"]
    assert (public_dir / "images" / "mods" / "old-mod.png").exists()

    removed = sweeper.sweep()
    assert removed == ["images/mods/old-mod.png", "images/source/stale_banner.gif"]
    assert not (public_dir / "images" / "mods" / "old-mod.png").exists()
    assert (public_dir / "images" / "source" / "hub.png").exists()
    assert (public_dir / "images" / "mods" / "some-mod.png").exists()
    assert sweeper.sweep() == []
