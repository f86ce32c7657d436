"""Transient hierarchy produced by one resolve call.

Keys are canonical (normalized) external ids. A node whose parent is not a key
is still part of the map and is treated as a root when the menu is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from navsync.domain.identifiers import normalize

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(slots=True, kw_only=True)
class PageNode:
    external_id: str
    local_id: int
    parent_external_id: str | None = None
    parent_local_id: int | None = None
    title: str = ""
    order: int = 0
    children: list[str] = field(default_factory=list[str])

    @property
    def sort_key(self) -> tuple[int, int]:
        """Sibling ordering: order hint first, local id breaks ties."""
        return (self.order, self.local_id)


@dataclass(slots=True)
class HierarchyMap:
    """Flattened rooted tree(s) keyed by canonical external id."""

    _nodes: dict[str, PageNode] = field(default_factory=dict["str", "PageNode"], repr=False)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __contains__(self, external_id: object) -> bool:
        return isinstance(external_id, str) and normalize(external_id) in self._nodes

    def __bool__(self) -> bool:
        return bool(self._nodes)

    @property
    def nodes(self) -> tuple[PageNode, ...]:
        return tuple(self._nodes.values())

    def add(self, node: PageNode) -> None:
        key = normalize(node.external_id)
        if key in self._nodes:
            raise ValueError(f"Page {key} already present in hierarchy")
        node.external_id = key
        self._nodes[key] = node

    def get(self, external_id: str) -> PageNode | None:
        return self._nodes.get(normalize(external_id))

    def has_resolvable_parent(self, node: PageNode) -> bool:
        return node.parent_external_id is not None and node.parent_external_id in self

    def roots(self) -> tuple[PageNode, ...]:
        roots = [node for node in self._nodes.values() if not self.has_resolvable_parent(node)]
        return tuple(sorted(roots, key=lambda node: node.sort_key))

    def children_of(self, node: PageNode) -> tuple[PageNode, ...]:
        """Children present in the map, in sibling order. Unknown ids are skipped."""

        children: list[PageNode] = []
        for child_id in node.children:
            child = self.get(child_id)
            if child is not None:
                children.append(child)
        return tuple(sorted(children, key=lambda child: child.sort_key))

    def merge(self, other: HierarchyMap) -> None:
        """Fold ``other`` into this map; pages already present keep their first node."""

        for key, node in other._nodes.items():  # noqa: SLF001
            self._nodes.setdefault(key, node)

    def validate_invariants(self) -> None:
        for key, node in self._nodes.items():
            if normalize(node.external_id) != key:
                raise ValueError(f"Hierarchy key {key} does not match node id {node.external_id}")
            for child_id in node.children:
                child = self.get(child_id)
                if child is None:
                    continue
                if child.parent_external_id is None or normalize(
                    child.parent_external_id
                ) != key:
                    raise ValueError(f"Child {child_id} does not point back to parent {key}")
