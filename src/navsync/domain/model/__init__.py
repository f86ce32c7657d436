"""Domain model for pages, hierarchies and menus."""

from __future__ import annotations

from .hierarchy import HierarchyMap, PageNode
from .menu import TOP_LEVEL, Menu, MenuItem, MenuItemFlags
from .pages import Page, PageSynced

__all__ = [
    "TOP_LEVEL",
    "HierarchyMap",
    "Menu",
    "MenuItem",
    "MenuItemFlags",
    "Page",
    "PageNode",
    "PageSynced",
]
