from __future__ import annotations

from navsync.domain.model import PageSynced
from navsync.domain.page_sync import record_page_sync
from tests.helpers.pages import CHILD_COMPACT, CHILD_DASHED, ROOT_COMPACT, ROOT_DASHED
from tests.support.navigation import FakePageRepository


def test_new_page_is_registered_with_normalized_ids() -> None:
    pages = FakePageRepository()
    event = PageSynced(local_id=5, external_id=CHILD_DASHED, parent_external_id=ROOT_DASHED)

    page = record_page_sync(event, pages=pages, title="Child", order=2)

    assert pages.get(5) is page
    assert page.external_id == CHILD_COMPACT
    assert page.parent_external_id == ROOT_COMPACT
    assert page.title == "Child"
    assert page.menu_order == 2


def test_parent_shape_is_kept_when_normalization_is_disabled() -> None:
    pages = FakePageRepository()
    event = PageSynced(local_id=5, external_id=CHILD_COMPACT, parent_external_id=ROOT_DASHED)

    page = record_page_sync(event, pages=pages, normalize_parent_ids=False)

    assert page.parent_external_id == ROOT_DASHED


def test_existing_page_is_updated_in_place() -> None:
    pages = FakePageRepository()
    existing = pages.put(5, CHILD_COMPACT, parent=ROOT_COMPACT, title="Old", order=4)
    event = PageSynced(local_id=5, external_id=CHILD_COMPACT)

    page = record_page_sync(event, pages=pages)

    assert page is existing
    assert page.parent_external_id is None
    assert page.title == "Old"
    assert page.menu_order == 4
    assert pages.count() == 1


def test_blank_parent_is_stored_as_none() -> None:
    pages = FakePageRepository()
    event = PageSynced(local_id=1, external_id=ROOT_COMPACT, parent_external_id="")

    page = record_page_sync(event, pages=pages)

    assert page.parent_external_id is None
