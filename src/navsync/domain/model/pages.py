"""Locally materialized pages and the inbound sync trigger."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False, kw_only=True)
class Page:
    """A local content item bound to an upstream page.

    ``parent_external_id`` keeps whatever textual shape it was written with.
    """

    external_id: str
    title: str = ""
    menu_order: int = 0
    parent_external_id: str | None = None
    local_id: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PageSynced:
    """Fired by the ingestion pipeline whenever a page has been synced."""

    local_id: int
    external_id: str
    parent_external_id: str | None = None
