import pytest

from catalog_api.errors import RecordNotFoundError, SubmissionValidationError
from catalog_api.models.category import CategorySubmission


def test_add_category_upserts_by_url(services):
    created = services.categories.add_category(CategorySubmission(name="Maps", url="maps"))
    updated = services.categories.add_category(
        CategorySubmission(name="Maps & Levels", url="maps", has_bg=True)
    )
    assert updated.id == created.id
    assert updated.name == "Maps & Levels"
    assert updated.has_bg is True
    assert [category.url for category in services.categories.list_categories()] == ["maps"]


def test_child_categories_can_be_filtered_by_parent(services):
    parent = services.categories.add_category(CategorySubmission(name="Gameplay", url="gameplay"))
    services.categories.add_category(
        CategorySubmission(name="Weapons", url="weapons", parent_id=parent.id)
    )
    children = services.categories.list_categories(parent_id=parent.id)
    assert [category.url for category in children] == ["weapons"]
    assert services.categories.get_category(parent.id).url == "gameplay"


def test_short_category_slug_is_rejected(services):
    with pytest.raises(SubmissionValidationError):
        services.categories.add_category(CategorySubmission(name="X", url=""))


def test_missing_category_raises(services):
    with pytest.raises(RecordNotFoundError):
        services.categories.get_category(42)
