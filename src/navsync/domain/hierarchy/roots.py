"""Locate the top of a page hierarchy."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from navsync.domain.identifiers import normalize

if TYPE_CHECKING:
    from navsync.domain.ports import PageRelationshipIndex

log = getLogger(__name__)

DEFAULT_MAX_ITERATIONS: Final[int] = 10


def find_root(
    index: PageRelationshipIndex,
    external_id: str,
    *,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> str:
    """Walk parent pointers up from ``external_id`` to the topmost local page.

    Stops at a page without a parent, at a parent that is not materialized
    locally, at a repeated page, or after ``max_iterations`` steps. Returns the
    last page that was found locally (``external_id`` itself when none was).
    """

    current = external_id
    last_local: str | None = None
    seen: set[str] = set()
    for _ in range(max_iterations):
        key = normalize(current)
        if key in seen or index.find_local_id(current) is None:
            break
        seen.add(key)
        last_local = current
        parent = index.parent_of(current)
        if not parent:
            return current
        current = parent
    else:
        log.warning(
            "Gave up looking for the root of %s after %d steps", external_id, max_iterations
        )
    return last_local if last_local is not None else current


def find_root_pages(index: PageRelationshipIndex) -> list[str]:
    """Return every locally materialized page with no stored parent, deduplicated."""

    roots: list[str] = []
    seen: set[str] = set()
    for external_id in index.root_ids():
        key = normalize(external_id)
        if key in seen:
            continue
        seen.add(key)
        roots.append(external_id)
    return roots
