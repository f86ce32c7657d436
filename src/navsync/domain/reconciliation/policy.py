"""Override policy: may the reconciler replace a menu item?"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from navsync.domain.item_state import MenuItemStateStore


class OverridePolicy:
    """Only synced items without a user override are replaceable.

    Manual items, override-protected items and legacy items carrying neither
    flag all fall on the preserve side. The reconciler asks this one predicate
    both when picking deletions and when deciding whether to skip an insert.
    """

    def __init__(self, state: MenuItemStateStore) -> None:
        self._state = state

    def should_replace(self, item_id: int) -> bool:
        return self._state.is_synced(item_id) and not self._state.has_override(item_id)
