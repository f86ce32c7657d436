"""SQLAlchemy adapter package for navsync."""

from __future__ import annotations

from .mappings import (
    mapper_registry,
    menu_item_table,
    menu_table,
    page_table,
    start_mappers,
)
from .repositories import (
    SqlAlchemyMenuItemFlagStore,
    SqlAlchemyMenuStore,
    SqlAlchemyPageRelationshipIndex,
    SqlAlchemyPageRepository,
)

__all__ = [
    "SqlAlchemyMenuItemFlagStore",
    "SqlAlchemyMenuStore",
    "SqlAlchemyPageRelationshipIndex",
    "SqlAlchemyPageRepository",
    "mapper_registry",
    "menu_item_table",
    "menu_table",
    "page_table",
    "start_mappers",
]
