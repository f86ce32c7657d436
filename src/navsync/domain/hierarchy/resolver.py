"""Build a hierarchy map by walking parent pointers downward from a root page.

The walk is depth-first and bounded by ``max_depth`` (the root sits at depth 0,
so ``max_depth=1`` yields the root alone). Pages that have never been
materialized locally are dropped together with their subtree. A per-call
visited set keyed by normalized id keeps a cyclic parent graph from producing
the same page twice. On such a cycle the start page is detached from its
parent so the map always has a root.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from navsync.config.navigation import DEFAULT_MAX_DEPTH, clamp_max_depth
from navsync.domain.identifiers import normalize
from navsync.domain.model import HierarchyMap, PageNode

if TYPE_CHECKING:
    from navsync.domain.ports import PageRelationshipIndex

log = getLogger(__name__)


class HierarchyResolver:
    def __init__(self, index: PageRelationshipIndex, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._index = index
        self._max_depth = clamp_max_depth(max_depth)

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def build(self, root_external_id: str, max_depth: int | None = None) -> HierarchyMap:
        """Resolve the tree below ``root_external_id`` into a fresh hierarchy map."""

        depth_limit = self._max_depth if max_depth is None else clamp_max_depth(max_depth)
        hierarchy = HierarchyMap()
        parent_external_id = self._index.parent_of(root_external_id)
        parent_local_id = (
            self._index.find_local_id(parent_external_id) if parent_external_id else None
        )
        root = _Walk(self._index, hierarchy, depth_limit).visit(
            root_external_id,
            parent_external_id=parent_external_id,
            parent_local_id=parent_local_id,
            depth=0,
        )
        if root is not None and hierarchy.has_resolvable_parent(root):
            # cyclic parent graph: the start page stays the root of its map
            log.debug("Page %s sits on a parent cycle, detaching it", root.external_id)
            root.parent_external_id = None
            root.parent_local_id = None
        log.debug(
            "Resolved %d pages below %s (max_depth=%d)",
            len(hierarchy),
            normalize(root_external_id),
            depth_limit,
        )
        return hierarchy


class _Walk:
    def __init__(
        self, index: PageRelationshipIndex, hierarchy: HierarchyMap, depth_limit: int
    ) -> None:
        self.index = index
        self.hierarchy = hierarchy
        self.depth_limit = depth_limit
        self.visited: set[str] = set()

    def visit(
        self,
        external_id: str,
        *,
        parent_external_id: str | None,
        parent_local_id: int | None,
        depth: int,
    ) -> PageNode | None:
        key = normalize(external_id)
        if key in self.visited:
            log.debug("Page %s already visited, skipping", key)
            return None

        local_id = self.index.find_local_id(external_id)
        if local_id is None:
            log.debug("Page %s has no local content item, dropping branch", key)
            return None
        self.visited.add(key)

        node = PageNode(
            external_id=key,
            local_id=local_id,
            parent_external_id=normalize(parent_external_id) if parent_external_id else None,
            parent_local_id=parent_local_id,
            title=self.index.title_of(local_id),
            order=self.index.order_of(local_id),
        )
        self.hierarchy.add(node)

        if depth + 1 >= self.depth_limit:
            return node

        children: list[PageNode] = []
        for child_id in self.index.children_of(external_id):
            child = self.visit(
                child_id,
                parent_external_id=key,
                parent_local_id=local_id,
                depth=depth + 1,
            )
            if child is not None:
                children.append(child)
        children.sort(key=lambda child: child.sort_key)
        node.children = [child.external_id for child in children]
        return node
