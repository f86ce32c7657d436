"""Apply a menu plan against the menu store.

Creates run before deletes so an interrupted run leaves duplicates rather than
holes. Afterwards, preserved items whose parent was replaced are moved under
the replacement for the same page, or to the top level.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from navsync.domain.errors import MenuItemCreationError
from navsync.domain.model import TOP_LEVEL

if TYPE_CHECKING:
    from navsync.domain.item_state import MenuItemStateStore
    from navsync.domain.ports import MenuStore

    from .plan import DesiredItem, MenuPlan

log = getLogger(__name__)


@dataclass(slots=True)
class ApplyResult:
    """Summary of store mutations performed by the apply pass."""

    created: int = 0
    deleted: int = 0
    kept: int = 0
    skipped: int = 0
    reparented: int = 0


class _PlanApplier:
    def __init__(
        self,
        menu_id: int,
        store: MenuStore,
        state: MenuItemStateStore,
    ) -> None:
        self.menu_id = menu_id
        self.store = store
        self.state = state
        self.result = ApplyResult()
        self.item_by_external_id: dict[str, int] = {}

    def create(self, desired: DesiredItem, parent_item_id: int) -> None:
        if desired.preserved_item_id is not None:
            item_id = desired.preserved_item_id
            self.result.kept += 1
        else:
            try:
                item_id = self.store.create_item(
                    self.menu_id,
                    desired.bound_content_id,
                    parent_item_id,
                    desired.order,
                )
            except MenuItemCreationError:
                log.debug(
                    "Skipping page %s: content item %s is gone",
                    desired.external_id,
                    desired.bound_content_id,
                )
                self.result.skipped += 1
                return
            self.state.mark_synced(item_id, desired.external_id)
            self.result.created += 1
        self.item_by_external_id[desired.external_id] = item_id
        for child in desired.children:
            self.create(child, item_id)

    def delete_replaced(self, plan: MenuPlan) -> None:
        for item in plan.replace:
            if item.id is not None and self.store.delete_item(item.id):
                self.result.deleted += 1

    def reparent_orphans(self, plan: MenuPlan) -> None:
        replaced = plan.partition.replaced_external_ids
        replaced_ids = {item.id for item in plan.replace}
        for item in plan.preserve:
            if item.id is None or item.parent_item_id not in replaced_ids:
                continue
            external_id = replaced.get(item.parent_item_id)
            new_parent = TOP_LEVEL
            if external_id is not None:
                new_parent = self.item_by_external_id.get(external_id, TOP_LEVEL)
            # position-only write; flags of manual and overridden items stay as they are
            if self.store.update_item(item.id, parent_item_id=new_parent, order=item.order_index):
                self.result.reparented += 1


def apply_plan(
    plan: MenuPlan,
    *,
    menu_id: int,
    store: MenuStore,
    state: MenuItemStateStore,
) -> ApplyResult:
    applier = _PlanApplier(menu_id, store, state)
    for root in plan.roots:
        applier.create(root, TOP_LEVEL)
    applier.delete_replaced(plan)
    applier.reparent_orphans(plan)
    return applier.result
