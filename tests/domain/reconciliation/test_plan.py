from __future__ import annotations

from navsync.domain.item_state import MenuItemStateStore
from navsync.domain.model import HierarchyMap, MenuItem, PageNode
from navsync.domain.reconciliation import (
    OverridePolicy,
    build_desired_tree,
    partition_items,
    plan_menu,
)
from tests.helpers.pages import CHILD_COMPACT, CHILD_DASHED, page_id
from tests.support.navigation import FakeMenuItemFlagStore


def _hierarchy(*nodes: PageNode) -> HierarchyMap:
    hierarchy = HierarchyMap()
    for node in nodes:
        hierarchy.add(node)
    return hierarchy


def _node(
    number: int,
    *,
    parent: int | None = None,
    order: int = 0,
    children: list[int] | None = None,
) -> PageNode:
    return PageNode(
        external_id=page_id(number),
        local_id=number,
        parent_external_id=page_id(parent) if parent is not None else None,
        parent_local_id=parent,
        title=f"Page {number}",
        order=order,
        children=[page_id(child) for child in children or []],
    )


def test_desired_tree_is_ordered_and_numbered_depth_first() -> None:
    hierarchy = _hierarchy(
        _node(1, children=[3, 2]),
        _node(2, parent=1, order=0),
        _node(3, parent=1, order=1, children=[4]),
        _node(4, parent=3),
        _node(5, order=-1),
    )

    roots = build_desired_tree(hierarchy)

    assert [root.bound_content_id for root in roots] == [5, 1]
    flattened = [(item.bound_content_id, item.order) for root in roots for item in root.walk()]
    assert flattened == [(5, 1), (1, 2), (2, 3), (3, 4), (4, 5)]


def test_desired_tree_skips_unknown_children_and_duplicates() -> None:
    hierarchy = _hierarchy(
        _node(1, children=[2, 9]),
        _node(2, parent=1, children=[3]),
        _node(3, parent=2, children=[2]),
    )

    roots = build_desired_tree(hierarchy)

    assert [item.bound_content_id for item in roots[0].walk()] == [1, 2, 3]


def test_protected_pages_reuse_their_preserved_item() -> None:
    hierarchy = _hierarchy(_node(1, children=[2]), _node(2, parent=1))

    roots = build_desired_tree(hierarchy, protected={page_id(2): 42})

    assert roots[0].preserved_item_id is None
    assert roots[0].children[0].preserved_item_id == 42


def test_partition_splits_on_policy() -> None:
    flags = FakeMenuItemFlagStore()
    state = MenuItemStateStore(flags)
    items = [MenuItem(id=number, menu_id=1, bound_content_id=number) for number in (1, 2, 3, 4)]
    state.mark_synced(1, page_id(1))
    state.mark_synced(2, CHILD_DASHED)
    state.set_override(2, True)
    state.mark_manual(3)

    partition = partition_items(items, policy=OverridePolicy(state), state=state)

    assert [item.id for item in partition.replace] == [1]
    assert [item.id for item in partition.preserve] == [2, 3, 4]
    assert partition.protected == {CHILD_COMPACT: 2}
    assert partition.replaced_external_ids == {1: page_id(1)}


def test_plan_counts_only_new_items() -> None:
    flags = FakeMenuItemFlagStore()
    state = MenuItemStateStore(flags)
    items = [MenuItem(id=10, menu_id=1, bound_content_id=2)]
    state.mark_synced(10, page_id(2))
    state.set_override(10, True)
    hierarchy = _hierarchy(_node(1, children=[2]), _node(2, parent=1))

    plan = plan_menu(items, hierarchy, policy=OverridePolicy(state), state=state)

    assert plan.create_count == 1
    assert plan.replace == ()
    assert [item.id for item in plan.preserve] == [10]
