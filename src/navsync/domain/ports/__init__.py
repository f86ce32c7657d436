"""Domain port definitions for adapters."""

from __future__ import annotations

from .menus import MenuItemFlagStore, MenuStore
from .pages import PageRelationshipIndex, PageRepository
from .unit_of_work import (
    NavigationRepositories,
    NavigationUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "MenuItemFlagStore",
    "MenuStore",
    "NavigationRepositories",
    "NavigationUnitOfWork",
    "PageRelationshipIndex",
    "PageRepository",
    "RepositoryCollection",
    "UnitOfWork",
]
