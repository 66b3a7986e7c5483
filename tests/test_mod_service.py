import json
from pathlib import Path

import pytest
from sqlalchemy import func, select

from catalog_api.db.models import ModDownloadRecord, ModRecord
from catalog_api.errors import PersistenceConflictError, SubmissionValidationError, UnsupportedFormatError
from catalog_api.models.category import CategorySubmission
from catalog_api.models.mod import ModSubmission
from catalog_api.models.source import SourceSubmission
from catalog_api.service.mods import ModService

from conftest import PNG_BYTES, TEXT_BYTES, data_url


def _submission(**overrides) -> ModSubmission:
    values = {"name": "Better Maps", "url": "better-maps", "description": "Full text"}
    values.update(overrides)
    return ModSubmission(**values)


def _count(session_factory, model) -> int:
    with session_factory() as session:
        return session.execute(select(func.count()).select_from(model)).scalar_one()


@pytest.mark.asyncio
async def test_relation_upsert_updates_instead_of_duplicating(services, session_factory):
    await services.mods.add_mod(
        _submission(downloads=json.dumps([{"name": "a", "url": "u1"}]))
    )
    mod = await services.mods.add_mod(
        _submission(downloads=json.dumps([{"name": "b", "url": "u1"}]))
    )

    assert [(d.name, d.url) for d in mod.downloads] == [("b", "u1")]
    assert mod.relation_failures is None
    assert _count(session_factory, ModDownloadRecord) == 1
    assert _count(session_factory, ModRecord) == 1


@pytest.mark.asyncio
async def test_all_relation_kinds_are_stored(services):
    await services.sources.add_source(SourceSubmission(name="Hub", url="hub"))
    mod = await services.mods.add_mod(
        _submission(
            downloads=json.dumps([{"url": "https://dl/1"}, {"name": "mirror", "url": "https://dl/2"}]),
            screenshots=json.dumps([{"url": "https://img/1.png"}]),
            sources=json.dumps([{"srcurl": "hub", "url": "https://hub/mods/1"}]),
        )
    )
    fetched = services.mods.get_mod("better-maps")
    assert fetched.id == mod.id
    assert [d.url for d in fetched.downloads] == ["https://dl/1", "https://dl/2"]
    assert fetched.downloads[0].name is None
    assert [s.url for s in fetched.screenshots] == ["https://img/1.png"]
    assert [(s.srcurl, s.url) for s in fetched.sources] == [("hub", "https://hub/mods/1")]


@pytest.mark.asyncio
async def test_failed_relation_item_does_not_block_siblings(services):
    await services.sources.add_source(SourceSubmission(name="Hub", url="hub"))
    mod = await services.mods.add_mod(
        _submission(
            sources=json.dumps(
                [
                    {"srcurl": "missing", "url": "https://missing/1"},
                    {"srcurl": "hub", "url": "https://hub/1"},
                ]
            ),
            screenshots=json.dumps([{"url": "https://img/1.png"}]),
        )
    )
    assert [(s.srcurl, s.url) for s in mod.sources] == [("hub", "https://hub/1")]
    assert [s.url for s in mod.screenshots] == ["https://img/1.png"]
    assert mod.relation_failures is not None
    [failure] = mod.relation_failures
    assert failure.relation == "sources"
    assert failure.key == "missing"
    assert failure.error == "persistence_conflict"
    assert "relationFailures" in mod.to_dict()


@pytest.mark.asyncio
async def test_malformed_relations_are_rejected_before_mutation(services, session_factory):
    with pytest.raises(SubmissionValidationError) as excinfo:
        await services.mods.add_mod(_submission(downloads="[{not json"))
    assert excinfo.value.error == "invalid_relations"

    with pytest.raises(SubmissionValidationError) as excinfo:
        await services.mods.add_mod(_submission(screenshots=json.dumps([{"name": "no url"}])))
    assert excinfo.value.details["relation"] == "screenshots"

    assert _count(session_factory, ModRecord) == 0


@pytest.mark.asyncio
async def test_short_slug_is_rejected(services, session_factory):
    with pytest.raises(SubmissionValidationError) as excinfo:
        await services.mods.add_mod(_submission(url="m"))
    assert excinfo.value.error == "invalid_slug"
    assert _count(session_factory, ModRecord) == 0


@pytest.mark.asyncio
async def test_two_byte_multibyte_slug_is_accepted(services):
    mod = await services.mods.add_mod(_submission(url="é"))
    assert mod.url == "é"


@pytest.mark.asyncio
async def test_banner_is_written_without_suffix(services, public_dir: Path):
    mod = await services.mods.add_mod(_submission(banner=data_url(PNG_BYTES)))
    assert mod.banner == "images/mods/better-maps.png"
    assert (public_dir / "images" / "mods" / "better-maps.png").read_bytes() == PNG_BYTES


@pytest.mark.asyncio
async def test_banner_removal_is_idempotent(services):
    await services.mods.add_mod(_submission(banner=data_url(PNG_BYTES)))
    first = await services.mods.add_mod(_submission(bremove=True))
    second = await services.mods.add_mod(_submission(bremove=True))
    assert first.banner is None
    assert second.banner is None


@pytest.mark.asyncio
async def test_unknown_banner_format_keeps_previous_banner(services):
    await services.mods.add_mod(_submission(banner=data_url(PNG_BYTES)))
    with pytest.raises(UnsupportedFormatError):
        await services.mods.add_mod(_submission(banner=data_url(TEXT_BYTES, "text/plain")))
    assert services.mods.get_mod("better-maps").banner == "images/mods/better-maps.png"


@pytest.mark.asyncio
async def test_relations_are_append_only_by_default(services):
    await services.mods.add_mod(_submission(screenshots=json.dumps([{"url": "a"}, {"url": "b"}])))
    mod = await services.mods.add_mod(_submission(screenshots=json.dumps([{"url": "b"}])))
    assert [s.url for s in mod.screenshots] == ["a", "b"]


@pytest.mark.asyncio
async def test_authoritative_relations_prune_stale_rows(session_factory, settings, store):
    service = ModService(
        session_factory=session_factory,
        settings=settings.model_copy(update={"authoritative_relations": True}),
        store=store,
    )
    await service.add_mod(_submission(screenshots=json.dumps([{"url": "a"}, {"url": "b"}])))
    mod = await service.add_mod(_submission(screenshots=json.dumps([{"url": "b"}])))
    assert [s.url for s in mod.screenshots] == ["b"]

    mod = await service.add_mod(_submission(screenshots=None))
    assert mod.screenshots == []


@pytest.mark.asyncio
async def test_unknown_category_is_a_persistence_conflict(services, session_factory):
    with pytest.raises(PersistenceConflictError):
        await services.mods.add_mod(_submission(category=999))
    assert _count(session_factory, ModRecord) == 0


@pytest.mark.asyncio
async def test_mod_filed_under_category(services):
    category = services.categories.add_category(CategorySubmission(name="Maps", url="maps"))
    mod = await services.mods.add_mod(_submission(category=category.id))
    assert mod.category_id == category.id


@pytest.mark.asyncio
async def test_list_mods_pages_in_id_order(services):
    for index in range(12):
        await services.mods.add_mod(_submission(name=f"Mod {index}", url=f"mod-{index:02d}"))

    first_page = services.mods.list_mods()
    assert len(first_page) == 10
    assert first_page[0].url == "mod-00"

    second_page = services.mods.list_mods(offset=10, count=10)
    assert [mod.url for mod in second_page] == ["mod-10", "mod-11"]

    assert [mod.url for mod in services.mods.list_mods(url="mod-03")] == ["mod-03"]
    assert len(services.mods.list_all_mods()) == 12
