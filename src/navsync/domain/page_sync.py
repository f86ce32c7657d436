"""Parent tracking for the inbound page-synced trigger."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from navsync.domain.identifiers import normalize
from navsync.domain.model import Page

if TYPE_CHECKING:
    from navsync.domain.model import PageSynced
    from navsync.domain.ports import PageRepository

log = getLogger(__name__)


def record_page_sync(
    event: PageSynced,
    *,
    pages: PageRepository,
    normalize_parent_ids: bool = True,
    title: str | None = None,
    order: int | None = None,
) -> Page:
    """Store the page's identity and parent pointer, creating the page if needed.

    The page's own id is always stored compact. The parent pointer is stored as
    received unless ``normalize_parent_ids`` is set, so readers must stay
    tolerant of both shapes.
    """

    parent = event.parent_external_id or None
    if parent is not None and normalize_parent_ids:
        parent = normalize(parent)

    page = pages.get(event.local_id)
    if page is None:
        page = Page(local_id=event.local_id, external_id=normalize(event.external_id))
        pages.add(page)
        log.debug("Registered page %s as content item %s", page.external_id, event.local_id)
    else:
        page.external_id = normalize(event.external_id)

    page.parent_external_id = parent
    if title is not None:
        page.title = title
    if order is not None:
        page.menu_order = order
    return page
