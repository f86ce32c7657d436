"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from navsync.adapters.sqlalchemy.mappings import menu_item_table, menu_table, page_table
from navsync.domain.errors import LookupMissError, MenuCreationError, MenuItemCreationError
from navsync.domain.identifiers import lookup_shapes
from navsync.domain.model import Menu, MenuItem, MenuItemFlags, Page

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyPageRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, page: Page) -> None:
        self.session.add(page)
        self.session.flush()

    def get(self, local_id: int) -> Page | None:
        return self.session.get(Page, local_id)

    def get_by_external_id(self, external_id: str) -> Page | None:
        stmt = (
            select(Page)
            .where(page_table.c.external_id.in_(lookup_shapes(external_id)))
            .order_by(page_table.c.local_id)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def count(self) -> int:
        stmt = select(func.count()).select_from(page_table)
        return int(self.session.execute(stmt).scalar_one())


class SqlAlchemyPageRelationshipIndex:
    """Page relationship lookups that match either stored id shape."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_local_id(self, external_id: str) -> int | None:
        stmt = (
            select(page_table.c.local_id)
            .where(page_table.c.external_id.in_(lookup_shapes(external_id)))
            .order_by(page_table.c.local_id)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def children_of(self, parent_external_id: str) -> list[str]:
        stmt = (
            select(page_table.c.external_id)
            .where(page_table.c.parent_external_id.in_(lookup_shapes(parent_external_id)))
            .order_by(page_table.c.menu_order, page_table.c.local_id)
        )
        return list(self.session.execute(stmt).scalars())

    def title_of(self, local_id: int) -> str:
        stmt = select(page_table.c.title).where(page_table.c.local_id == local_id)
        return self.session.execute(stmt).scalar_one_or_none() or ""

    def order_of(self, local_id: int) -> int:
        stmt = select(page_table.c.menu_order).where(page_table.c.local_id == local_id)
        return self.session.execute(stmt).scalar_one_or_none() or 0

    def parent_of(self, external_id: str) -> str | None:
        stmt = (
            select(page_table.c.parent_external_id)
            .where(page_table.c.external_id.in_(lookup_shapes(external_id)))
            .order_by(page_table.c.local_id)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none() or None

    def root_ids(self) -> list[str]:
        stmt = (
            select(page_table.c.external_id)
            .where(
                or_(
                    page_table.c.parent_external_id.is_(None),
                    page_table.c.parent_external_id == "",
                )
            )
            .order_by(page_table.c.menu_order, page_table.c.local_id)
        )
        return list(self.session.execute(stmt).scalars())


class SqlAlchemyMenuStore:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_or_create_menu(self, name: str) -> int:
        if not name.strip():
            raise MenuCreationError("Menu name must not be blank")
        existing = self.find_menu(name)
        if existing is not None:
            return existing
        menu = Menu(name=name)
        self.session.add(menu)
        try:
            self.session.flush()
        except SQLAlchemyError as exc:
            # menu creation is the first write of a reconciliation
            self.session.rollback()
            raise MenuCreationError(f"Could not create menu {name!r}") from exc
        return cast(int, menu.id)

    def find_menu(self, name: str) -> int | None:
        stmt = select(menu_table.c.id).where(menu_table.c.name == name)
        return self.session.execute(stmt).scalar_one_or_none()

    def list_items(self, menu_id: int) -> list[MenuItem]:
        stmt = (
            select(MenuItem)
            .where(menu_item_table.c.menu_id == menu_id)
            .order_by(menu_item_table.c.order_index, menu_item_table.c.id)
        )
        return list(self.session.execute(stmt).scalars())

    def create_item(
        self,
        menu_id: int,
        bound_content_id: int,
        parent_item_id: int,
        order: int,
    ) -> int:
        page = self.session.get(Page, bound_content_id)
        if page is None:
            raise MenuItemCreationError(f"Content item {bound_content_id} does not exist")
        item = MenuItem(
            menu_id=menu_id,
            bound_content_id=bound_content_id,
            parent_item_id=parent_item_id,
            order_index=order,
            title=page.title,
        )
        self.session.add(item)
        self.session.flush()
        return cast(int, item.id)

    def update_item(self, item_id: int, *, parent_item_id: int, order: int) -> bool:
        item = self.session.get(MenuItem, item_id)
        if item is None:
            return False
        item.parent_item_id = parent_item_id
        item.order_index = order
        self.session.flush()
        return True

    def delete_item(self, item_id: int) -> bool:
        item = self.session.get(MenuItem, item_id)
        if item is None:
            return False
        self.session.delete(item)
        self.session.flush()
        return True


class SqlAlchemyMenuItemFlagStore:
    """Flags live in columns on the menu item row."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_flags(self, item_id: int) -> MenuItemFlags:
        item = self.session.get(MenuItem, item_id)
        if item is None:
            return MenuItemFlags()
        return item.flags

    def set_flags(self, item_id: int, flags: MenuItemFlags) -> None:
        item = self.session.get(MenuItem, item_id)
        if item is None:
            raise LookupMissError(f"Menu item {item_id} does not exist")
        item.apply_flags(flags)
        self.session.flush()


if TYPE_CHECKING:
    from navsync.domain.ports import (
        MenuItemFlagStore,
        MenuStore,
        PageRelationshipIndex,
        PageRepository,
    )

    _session_stub = cast("Session", object())
    _pages_check: PageRepository = SqlAlchemyPageRepository(_session_stub)
    _index_check: PageRelationshipIndex = SqlAlchemyPageRelationshipIndex(_session_stub)
    _menus_check: MenuStore = SqlAlchemyMenuStore(_session_stub)
    _flags_check: MenuItemFlagStore = SqlAlchemyMenuItemFlagStore(_session_stub)
