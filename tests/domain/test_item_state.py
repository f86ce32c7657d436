from __future__ import annotations

from navsync.domain.item_state import MenuItemStateStore
from navsync.domain.model import MenuItemFlags
from tests.helpers.pages import CHILD_DASHED
from tests.support.navigation import FakeMenuItemFlagStore


def test_unknown_items_have_no_flags() -> None:
    state = MenuItemStateStore(FakeMenuItemFlagStore())

    assert state.flags_of(7) == MenuItemFlags()
    assert not state.is_synced(7)
    assert not state.is_manual(7)
    assert not state.has_override(7)
    assert state.external_id_of(7) is None


def test_mark_synced_records_external_id_and_clears_manual() -> None:
    flags = FakeMenuItemFlagStore()
    flags.flags[1] = MenuItemFlags(manually_added=True, override_enabled=True)
    state = MenuItemStateStore(flags)

    state.mark_synced(1, CHILD_DASHED)

    assert state.is_synced(1)
    assert not state.is_manual(1)
    assert state.external_id_of(1) == CHILD_DASHED
    assert state.has_override(1)


def test_mark_manual_clears_synced_state() -> None:
    state = MenuItemStateStore(FakeMenuItemFlagStore())
    state.mark_synced(1, CHILD_DASHED)

    state.mark_manual(1)

    assert state.is_manual(1)
    assert not state.is_synced(1)
    assert state.external_id_of(1) is None


def test_override_is_independent_of_sync_flags() -> None:
    state = MenuItemStateStore(FakeMenuItemFlagStore())
    state.mark_synced(1, CHILD_DASHED)

    state.set_override(1, True)
    assert state.has_override(1)
    assert state.is_synced(1)

    state.set_override(1, False)
    assert not state.has_override(1)
    assert state.is_synced(1)
