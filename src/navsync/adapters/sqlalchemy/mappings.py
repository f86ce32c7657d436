"""SQLAlchemy mapping metadata for the navsync domain model."""

from __future__ import annotations

from functools import cache

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table, orm
from sqlalchemy.orm import configure_mappers

from navsync.domain.model import TOP_LEVEL, Menu, MenuItem, Page


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Pages -----------------------------------------------------------------------

# Both id columns may hold compact or dashed values written by older releases.
page_table = Table(
    "page",
    mapper_registry.metadata,
    Column("local_id", Integer, primary_key=True, autoincrement=True),
    Column("external_id", String, nullable=False, index=True),
    Column("parent_external_id", String, nullable=True, index=True),
    Column("title", String, nullable=False, default=""),
    Column("menu_order", Integer, nullable=False, default=0),
)

# Menus -----------------------------------------------------------------------

menu_table = Table(
    "menu",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False, unique=True),
)

# bound_content_id has no FK: content may vanish between resolve and reconcile.
menu_item_table = Table(
    "menu_item",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "menu_id",
        Integer,
        ForeignKey("menu.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("bound_content_id", Integer, nullable=False),
    Column("parent_item_id", Integer, nullable=False, default=TOP_LEVEL),
    Column("order_index", Integer, nullable=False, default=0),
    Column("title", String, nullable=False, default=""),
    Column("synced_from_source", Boolean, nullable=False, default=False),
    Column("source_external_id", String, nullable=True),
    Column("override_enabled", Boolean, nullable=False, default=False),
    Column("manually_added", Boolean, nullable=False, default=False),
)


@cache
def start_mappers() -> orm.registry:
    """Map domain dataclasses onto the tables (idempotent)."""

    mapper_registry.map_imperatively(Page, page_table)
    mapper_registry.map_imperatively(Menu, menu_table)
    mapper_registry.map_imperatively(MenuItem, menu_item_table)

    configure_mappers()
    return mapper_registry
