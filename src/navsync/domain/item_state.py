"""Per-item sync state on top of an injected flag store.

Each mutator touches one flag group. The only coupled pair is synced/manual,
which are mutually exclusive: marking one clears the other.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from navsync.domain.model import MenuItemFlags

if TYPE_CHECKING:
    from navsync.domain.ports import MenuItemFlagStore


class MenuItemStateStore:
    def __init__(self, flags: MenuItemFlagStore) -> None:
        self._flags = flags

    def mark_synced(self, item_id: int, external_id: str) -> None:
        current = self._flags.get_flags(item_id)
        self._flags.set_flags(
            item_id,
            replace(
                current,
                synced_from_source=True,
                source_external_id=external_id,
                manually_added=False,
            ),
        )

    def mark_manual(self, item_id: int) -> None:
        current = self._flags.get_flags(item_id)
        self._flags.set_flags(
            item_id,
            replace(
                current,
                manually_added=True,
                synced_from_source=False,
                source_external_id=None,
            ),
        )

    def set_override(self, item_id: int, enabled: bool) -> None:  # noqa: FBT001
        current = self._flags.get_flags(item_id)
        self._flags.set_flags(item_id, replace(current, override_enabled=enabled))

    def flags_of(self, item_id: int) -> MenuItemFlags:
        return self._flags.get_flags(item_id)

    def is_synced(self, item_id: int) -> bool:
        return self._flags.get_flags(item_id).synced_from_source

    def is_manual(self, item_id: int) -> bool:
        return self._flags.get_flags(item_id).manually_added

    def has_override(self, item_id: int) -> bool:
        return self._flags.get_flags(item_id).override_enabled

    def external_id_of(self, item_id: int) -> str | None:
        return self._flags.get_flags(item_id).source_external_id
