"""Create page, menu and menu_item tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "page",
        sa.Column("local_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("external_id", sa.String(), nullable=False),
        sa.Column("parent_external_id", sa.String(), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("menu_order", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("local_id", name=op.f("pk_page")),
    )
    op.create_index(op.f("ix_page_external_id"), "page", ["external_id"])
    op.create_index(op.f("ix_page_parent_external_id"), "page", ["parent_external_id"])

    op.create_table(
        "menu",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_menu")),
        sa.UniqueConstraint("name", name=op.f("uq_menu_name")),
    )

    op.create_table(
        "menu_item",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("menu_id", sa.Integer(), nullable=False),
        sa.Column("bound_content_id", sa.Integer(), nullable=False),
        sa.Column("parent_item_id", sa.Integer(), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("synced_from_source", sa.Boolean(), nullable=False),
        sa.Column("source_external_id", sa.String(), nullable=True),
        sa.Column("override_enabled", sa.Boolean(), nullable=False),
        sa.Column("manually_added", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ["menu_id"],
            ["menu.id"],
            name=op.f("fk_menu_item_menu_id_menu"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_menu_item")),
    )
    op.create_index(op.f("ix_menu_item_menu_id"), "menu_item", ["menu_id"])


def downgrade() -> None:
    op.drop_index(op.f("ix_menu_item_menu_id"), table_name="menu_item")
    op.drop_table("menu_item")
    op.drop_table("menu")
    op.drop_index(op.f("ix_page_parent_external_id"), table_name="page")
    op.drop_index(op.f("ix_page_external_id"), table_name="page")
    op.drop_table("page")
