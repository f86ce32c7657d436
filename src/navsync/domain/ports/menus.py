"""Ports for the navigation menu store and per-item sync flags."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from navsync.domain.model import MenuItem, MenuItemFlags


@runtime_checkable
class MenuStore(Protocol):
    """Persistent, ordered, nested menus.

    ``get_or_create_menu`` raises ``MenuCreationError`` when the menu cannot be
    obtained; ``create_item`` raises ``MenuItemCreationError`` when the bound
    content item does not exist.
    """

    def get_or_create_menu(self, name: str) -> int: ...

    def find_menu(self, name: str) -> int | None: ...

    def list_items(self, menu_id: int) -> Sequence[MenuItem]: ...

    def create_item(
        self,
        menu_id: int,
        bound_content_id: int,
        parent_item_id: int,
        order: int,
    ) -> int: ...

    def update_item(self, item_id: int, *, parent_item_id: int, order: int) -> bool: ...

    def delete_item(self, item_id: int) -> bool: ...


@runtime_checkable
class MenuItemFlagStore(Protocol):
    """Keyed flag storage; unknown items read as all-false flags."""

    def get_flags(self, item_id: int) -> MenuItemFlags: ...

    def set_flags(self, item_id: int, flags: MenuItemFlags) -> None: ...
