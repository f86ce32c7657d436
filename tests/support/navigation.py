"""In-memory fakes for the navigation ports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from navsync.domain.errors import LookupMissError, MenuCreationError, MenuItemCreationError
from navsync.domain.identifiers import lookup_shapes, normalize
from navsync.domain.model import TOP_LEVEL, MenuItem, MenuItemFlags, Page
from navsync.domain.ports import NavigationRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from navsync.domain.ports import (
        MenuItemFlagStore,
        MenuStore,
        PageRelationshipIndex,
        PageRepository,
    )


class FakePageRepository:
    def __init__(self) -> None:
        self.pages: dict[int, Page] = {}

    def add(self, page: Page) -> None:
        if page.local_id is None:
            page.local_id = max(self.pages, default=0) + 1
        self.pages[page.local_id] = page

    def get(self, local_id: int) -> Page | None:
        return self.pages.get(local_id)

    def get_by_external_id(self, external_id: str) -> Page | None:
        shapes = lookup_shapes(external_id)
        for local_id in sorted(self.pages):
            if self.pages[local_id].external_id in shapes:
                return self.pages[local_id]
        return None

    def count(self) -> int:
        return len(self.pages)

    def put(
        self,
        local_id: int,
        external_id: str,
        *,
        parent: str | None = None,
        title: str = "",
        order: int = 0,
    ) -> Page:
        page = Page(
            local_id=local_id,
            external_id=external_id,
            parent_external_id=parent,
            title=title or external_id,
            menu_order=order,
        )
        self.pages[local_id] = page
        return page


class FakePageIndex:
    """Relationship index reading straight from a fake page repository."""

    def __init__(self, pages: FakePageRepository) -> None:
        self._pages = pages
        self.children_calls: list[str] = []

    def _ordered(self) -> list[Page]:
        return sorted(self._pages.pages.values(), key=lambda page: page.local_id or 0)

    def find_local_id(self, external_id: str) -> int | None:
        page = self._pages.get_by_external_id(external_id)
        return page.local_id if page is not None else None

    def children_of(self, parent_external_id: str) -> list[str]:
        self.children_calls.append(parent_external_id)
        shapes = lookup_shapes(parent_external_id)
        children = [page for page in self._ordered() if page.parent_external_id in shapes]
        children.sort(key=lambda page: (page.menu_order, page.local_id or 0))
        return [page.external_id for page in children]

    def title_of(self, local_id: int) -> str:
        page = self._pages.get(local_id)
        return page.title if page is not None else ""

    def order_of(self, local_id: int) -> int:
        page = self._pages.get(local_id)
        return page.menu_order if page is not None else 0

    def parent_of(self, external_id: str) -> str | None:
        page = self._pages.get_by_external_id(external_id)
        if page is None:
            return None
        return page.parent_external_id or None

    def root_ids(self) -> list[str]:
        roots = [page for page in self._ordered() if not page.parent_external_id]
        roots.sort(key=lambda page: (page.menu_order, page.local_id or 0))
        return [page.external_id for page in roots]


class FakeMenuStore:
    """Menu store keeping items and their flags in dictionaries.

    ``fail_menu_creation`` makes every get-or-create fail; ``missing_content``
    lists content ids that cannot be bound.
    """

    def __init__(self, *, fail_menu_creation: bool = False) -> None:
        self.fail_menu_creation = fail_menu_creation
        self.missing_content: set[int] = set()
        self.menus: dict[str, int] = {}
        self.items: dict[int, MenuItem] = {}
        self.calls: list[tuple[str, int]] = []
        self._next_id = 100

    def get_or_create_menu(self, name: str) -> int:
        if self.fail_menu_creation or not name.strip():
            raise MenuCreationError(f"Could not create menu {name!r}")
        if name not in self.menus:
            self.menus[name] = len(self.menus) + 1
        return self.menus[name]

    def find_menu(self, name: str) -> int | None:
        return self.menus.get(name)

    def list_items(self, menu_id: int) -> list[MenuItem]:
        items = [item for item in self.items.values() if item.menu_id == menu_id]
        return sorted(items, key=lambda item: (item.order_index, item.id or 0))

    def create_item(
        self,
        menu_id: int,
        bound_content_id: int,
        parent_item_id: int,
        order: int,
    ) -> int:
        if bound_content_id in self.missing_content:
            raise MenuItemCreationError(f"Content item {bound_content_id} does not exist")
        self._next_id += 1
        self.items[self._next_id] = MenuItem(
            id=self._next_id,
            menu_id=menu_id,
            bound_content_id=bound_content_id,
            parent_item_id=parent_item_id,
            order_index=order,
        )
        self.calls.append(("create", self._next_id))
        return self._next_id

    def update_item(self, item_id: int, *, parent_item_id: int, order: int) -> bool:
        item = self.items.get(item_id)
        if item is None:
            return False
        item.parent_item_id = parent_item_id
        item.order_index = order
        self.calls.append(("update", item_id))
        return True

    def delete_item(self, item_id: int) -> bool:
        if self.items.pop(item_id, None) is None:
            return False
        self.calls.append(("delete", item_id))
        return True

    def add_existing(
        self,
        menu_id: int,
        bound_content_id: int,
        *,
        parent_item_id: int = TOP_LEVEL,
        order: int = 0,
    ) -> int:
        """Insert an item as if it had been created outside the reconciler."""

        self._next_id += 1
        self.items[self._next_id] = MenuItem(
            id=self._next_id,
            menu_id=menu_id,
            bound_content_id=bound_content_id,
            parent_item_id=parent_item_id,
            order_index=order,
        )
        return self._next_id

    def item_for_content(self, bound_content_id: int) -> MenuItem | None:
        for item in self.items.values():
            if item.bound_content_id == bound_content_id:
                return item
        return None


class FakeMenuItemFlagStore:
    def __init__(self, menus: FakeMenuStore | None = None) -> None:
        self._menus = menus
        self.flags: dict[int, MenuItemFlags] = {}

    def get_flags(self, item_id: int) -> MenuItemFlags:
        return self.flags.get(item_id, MenuItemFlags())

    def set_flags(self, item_id: int, flags: MenuItemFlags) -> None:
        if self._menus is not None and item_id not in self._menus.items:
            raise LookupMissError(f"Menu item {item_id} does not exist")
        self.flags[item_id] = flags


@dataclass
class FakeNavigationRepositories:
    pages: FakePageRepository = field(default_factory=FakePageRepository)
    menus: FakeMenuStore = field(default_factory=FakeMenuStore)
    page_index: FakePageIndex = field(init=False)
    menu_item_flags: FakeMenuItemFlagStore = field(init=False)

    def __post_init__(self) -> None:
        self.page_index = FakePageIndex(self.pages)
        self.menu_item_flags = FakeMenuItemFlagStore(self.menus)

    def as_collection(self) -> NavigationRepositories:
        return NavigationRepositories(
            pages=self.pages,
            page_index=self.page_index,
            menus=self.menus,
            menu_item_flags=self.menu_item_flags,
        )


class FakeNavigationUnitOfWork:
    """Unit of work over shared fakes; records commits and rollbacks."""

    def __init__(self, repositories: FakeNavigationRepositories) -> None:
        self._repositories = repositories.as_collection()
        self.committed = False
        self.rolled_back = False

    @property
    def repositories(self) -> NavigationRepositories:
        return self._repositories

    def __enter__(self) -> FakeNavigationUnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True


def synced_external_ids(repositories: FakeNavigationRepositories) -> set[str]:
    return {
        normalize(flags.source_external_id)
        for flags in repositories.menu_item_flags.flags.values()
        if flags.synced_from_source and flags.source_external_id
    }


if TYPE_CHECKING:
    _fake_pages = FakePageRepository()
    _fake_menus = FakeMenuStore()
    _pages_check: PageRepository = _fake_pages
    _index_check: PageRelationshipIndex = FakePageIndex(_fake_pages)
    _menus_check: MenuStore = _fake_menus
    _flags_check: MenuItemFlagStore = FakeMenuItemFlagStore(_fake_menus)
