"""Menu reconciler: make a live menu match a resolved hierarchy.

One call moves every logical page through the sync lifecycle:

- not yet in the menu: a synced item is created
- synced, no override: the item is replaced by a fresh one
- synced with override: the item is left alone, even when the page is gone
- manual or unflagged legacy items: never deleted

The reconciler does no locking. Callers must keep at most one reconciliation
per menu name in flight.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from navsync.domain.errors import MenuCreationError

from .apply import apply_plan
from .plan import MenuPlan, plan_menu
from .policy import OverridePolicy

if TYPE_CHECKING:
    from navsync.domain.item_state import MenuItemStateStore
    from navsync.domain.model import HierarchyMap
    from navsync.domain.ports import MenuStore

log = getLogger(__name__)


@dataclass(slots=True, kw_only=True)
class ReconcileResult:
    """Outcome of one reconciliation; ``menu_id`` is None when the menu was unavailable."""

    menu_id: int | None
    created: int = 0
    deleted: int = 0
    preserved: int = 0
    skipped: int = 0
    reparented: int = 0

    @property
    def ok(self) -> bool:
        return self.menu_id is not None


class MenuReconciler:
    def __init__(
        self,
        menus: MenuStore,
        state: MenuItemStateStore,
        *,
        policy: OverridePolicy | None = None,
    ) -> None:
        self._menus = menus
        self._state = state
        self._policy = policy or OverridePolicy(state)

    def create_or_update(self, menu_name: str, hierarchy: HierarchyMap) -> int | None:
        """Reconcile ``menu_name`` and return its id, or None if the menu is unavailable."""

        return self.reconcile(menu_name, hierarchy).menu_id

    def reconcile(self, menu_name: str, hierarchy: HierarchyMap) -> ReconcileResult:
        try:
            menu_id = self._menus.get_or_create_menu(menu_name)
        except MenuCreationError:
            log.exception("Could not get or create menu %r, nothing changed", menu_name)
            return ReconcileResult(menu_id=None)

        plan = self._plan(menu_id, hierarchy)
        applied = apply_plan(plan, menu_id=menu_id, store=self._menus, state=self._state)
        result = ReconcileResult(
            menu_id=menu_id,
            created=applied.created,
            deleted=applied.deleted,
            preserved=len(plan.preserve),
            skipped=applied.skipped,
            reparented=applied.reparented,
        )
        log.info(
            "Reconciled menu %r (id=%s): created=%d, deleted=%d, preserved=%d, skipped=%d",
            menu_name,
            menu_id,
            result.created,
            result.deleted,
            result.preserved,
            result.skipped,
        )
        return result

    def preview(self, menu_name: str, hierarchy: HierarchyMap) -> MenuPlan:
        """Plan against the current menu without creating it or touching any item."""

        menu_id = self._menus.find_menu(menu_name)
        if menu_id is None:
            return plan_menu((), hierarchy, policy=self._policy, state=self._state)
        return self._plan(menu_id, hierarchy)

    def _plan(self, menu_id: int, hierarchy: HierarchyMap) -> MenuPlan:
        items = self._menus.list_items(menu_id)
        return plan_menu(items, hierarchy, policy=self._policy, state=self._state)
