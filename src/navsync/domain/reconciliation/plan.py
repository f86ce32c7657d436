"""Pure construction of the desired menu.

The plan is the contract between the read side (current menu items, flags,
override policy) and the apply pass that issues store calls. Nothing in here
writes to a store, so a plan can be inspected as a dry run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from navsync.domain.identifiers import normalize

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from navsync.domain.item_state import MenuItemStateStore
    from navsync.domain.model import HierarchyMap, MenuItem, PageNode

    from .policy import OverridePolicy

log = getLogger(__name__)


@dataclass(slots=True, kw_only=True)
class DesiredItem:
    """One menu entry the hierarchy asks for.

    ``preserved_item_id`` is set when an override-protected item already
    carries this page; such an entry is not created again and its children
    nest under the preserved item.
    """

    external_id: str
    bound_content_id: int
    title: str
    order: int
    children: list[DesiredItem] = field(default_factory=list["DesiredItem"])
    preserved_item_id: int | None = None

    def walk(self) -> Iterator[DesiredItem]:
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(slots=True, kw_only=True)
class Partition:
    replace: tuple[MenuItem, ...] = ()
    preserve: tuple[MenuItem, ...] = ()
    # normalized external id -> preserved synced item carrying it
    protected: dict[str, int] = field(default_factory=dict["str", "int"])
    # replaced item id -> normalized external id it was bound to
    replaced_external_ids: dict[int, str] = field(default_factory=dict["int", "str"])


@dataclass(slots=True, kw_only=True)
class MenuPlan:
    roots: list[DesiredItem] = field(default_factory=list["DesiredItem"])
    partition: Partition = field(default_factory=Partition)

    @property
    def replace(self) -> tuple[MenuItem, ...]:
        return self.partition.replace

    @property
    def preserve(self) -> tuple[MenuItem, ...]:
        return self.partition.preserve

    def walk(self) -> Iterator[DesiredItem]:
        for root in self.roots:
            yield from root.walk()

    @property
    def create_count(self) -> int:
        return sum(1 for item in self.walk() if item.preserved_item_id is None)


def partition_items(
    items: Sequence[MenuItem],
    *,
    policy: OverridePolicy,
    state: MenuItemStateStore,
) -> Partition:
    """Split current items into replace candidates and the preserve set."""

    replace: list[MenuItem] = []
    preserve: list[MenuItem] = []
    protected: dict[str, int] = {}
    replaced_external_ids: dict[int, str] = {}
    for item in items:
        if item.id is None:
            continue
        external_id = state.external_id_of(item.id)
        if policy.should_replace(item.id):
            replace.append(item)
            if external_id:
                replaced_external_ids[item.id] = normalize(external_id)
            continue
        preserve.append(item)
        if external_id:
            protected.setdefault(normalize(external_id), item.id)
    return Partition(
        replace=tuple(replace),
        preserve=tuple(preserve),
        protected=protected,
        replaced_external_ids=replaced_external_ids,
    )


def build_desired_tree(
    hierarchy: HierarchyMap,
    *,
    protected: Mapping[str, int] | None = None,
) -> list[DesiredItem]:
    """Turn a hierarchy map into ordered desired items, roots first.

    Child ids missing from the map are skipped. A page is placed at most once
    even if a malformed map links it from several parents.
    """

    protected = protected or {}
    placed: set[str] = set()
    position = 0

    def build(node: PageNode) -> DesiredItem | None:
        nonlocal position
        if node.external_id in placed:
            log.debug("Page %s already placed in menu, skipping", node.external_id)
            return None
        placed.add(node.external_id)
        position += 1
        desired = DesiredItem(
            external_id=node.external_id,
            bound_content_id=node.local_id,
            title=node.title,
            order=position,
            preserved_item_id=protected.get(node.external_id),
        )
        for child in hierarchy.children_of(node):
            built = build(child)
            if built is not None:
                desired.children.append(built)
        return desired

    roots: list[DesiredItem] = []
    for root in hierarchy.roots():
        built = build(root)
        if built is not None:
            roots.append(built)
    return roots


def plan_menu(
    items: Sequence[MenuItem],
    hierarchy: HierarchyMap,
    *,
    policy: OverridePolicy,
    state: MenuItemStateStore,
) -> MenuPlan:
    partition = partition_items(items, policy=policy, state=state)
    roots = build_desired_tree(hierarchy, protected=partition.protected)
    return MenuPlan(roots=roots, partition=partition)
