"""Menu entities owned by the external menu store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

TOP_LEVEL: Final[int] = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class MenuItemFlags:
    """Sync bookkeeping for one menu item.

    ``synced_from_source`` and ``manually_added`` are mutually exclusive;
    ``override_enabled`` is independent of both.
    """

    synced_from_source: bool = False
    source_external_id: str | None = None
    override_enabled: bool = False
    manually_added: bool = False


@dataclass(eq=False, kw_only=True)
class Menu:
    name: str
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class MenuItem:
    menu_id: int
    bound_content_id: int
    parent_item_id: int = TOP_LEVEL
    order_index: int = 0
    title: str = ""
    synced_from_source: bool = False
    source_external_id: str | None = None
    override_enabled: bool = False
    manually_added: bool = False
    id: int | None = None

    @property
    def is_top_level(self) -> bool:
        return not self.parent_item_id

    @property
    def flags(self) -> MenuItemFlags:
        return MenuItemFlags(
            synced_from_source=self.synced_from_source,
            source_external_id=self.source_external_id,
            override_enabled=self.override_enabled,
            manually_added=self.manually_added,
        )

    def apply_flags(self, flags: MenuItemFlags) -> None:
        self.synced_from_source = flags.synced_from_source
        self.source_external_id = flags.source_external_id
        self.override_enabled = flags.override_enabled
        self.manually_added = flags.manually_added
