"""Application orchestration entry points."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from navsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyNavigationUnitOfWork,
    is_started,
    startup,
)
from navsync.config import NavigationConfig, get_navigation_config
from navsync.domain.errors import (
    MenuCreationError,
    NoRootPagesError,
    ReconciliationInProgressError,
)
from navsync.domain.hierarchy import HierarchyResolver, find_root, find_root_pages
from navsync.domain.identifiers import normalize
from navsync.domain.item_state import MenuItemStateStore
from navsync.domain.model import HierarchyMap
from navsync.domain.page_sync import record_page_sync
from navsync.domain.ports.unit_of_work import NavigationUnitOfWork
from navsync.domain.reconciliation import MenuReconciler, ReconcileResult

if TYPE_CHECKING:
    from navsync.domain.model import PageSynced
    from navsync.domain.ports import NavigationRepositories, PageRelationshipIndex

UnitOfWorkFactory = Callable[[], NavigationUnitOfWork]
MenuSyncedListener = Callable[[int, str, HierarchyMap], None]


log = getLogger(__name__)

_MENU_LOCKS: dict[str, threading.Lock] = {}
_MENU_LOCKS_GUARD = threading.Lock()


@dataclass(slots=True, kw_only=True)
class MenuSyncResult:
    """Outcome of a full menu sync across every root page."""

    menu_id: int
    menu_name: str
    item_count: int
    roots: list[str]
    pages: int
    reconcile: ReconcileResult
    hierarchy: HierarchyMap = field(default_factory=HierarchyMap, repr=False)


@dataclass(slots=True, kw_only=True)
class NavigationReport:
    """Read-only snapshot used by diagnostics."""

    menu_name: str
    page_count: int
    hierarchies: dict[str, HierarchyMap] = field(default_factory=dict["str", "HierarchyMap"])
    menu_id: int | None = None
    menu_item_count: int = 0

    @property
    def total_pages(self) -> int:
        combined = HierarchyMap()
        for hierarchy in self.hierarchies.values():
            combined.merge(hierarchy)
        return len(combined)


@contextmanager
def menu_sync_guard(menu_name: str) -> Iterator[None]:
    """Refuse to run two reconciliations of the same menu at once."""

    with _MENU_LOCKS_GUARD:
        lock = _MENU_LOCKS.setdefault(menu_name, threading.Lock())
    if not lock.acquire(blocking=False):
        raise ReconciliationInProgressError(f"Menu {menu_name!r} is already being reconciled")
    try:
        yield
    finally:
        lock.release()


def _unit_of_work_factory(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        startup()
    return SqlAlchemyNavigationUnitOfWork


def _reconciler(repositories: NavigationRepositories) -> MenuReconciler:
    return MenuReconciler(repositories.menus, MenuItemStateStore(repositories.menu_item_flags))


def build_hierarchy_map(
    root_external_id: str,
    max_depth: int | None = None,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> HierarchyMap:
    """Resolve the page tree below ``root_external_id``."""

    factory = _unit_of_work_factory(unit_of_work_factory)
    with factory() as uow:
        resolver = HierarchyResolver(uow.repositories.page_index)
        return resolver.build(root_external_id, max_depth)


def create_or_update_menu(
    menu_name: str,
    hierarchy_map: HierarchyMap,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> int | None:
    """Reconcile ``menu_name`` against ``hierarchy_map``; None when the menu is unavailable."""

    factory = _unit_of_work_factory(unit_of_work_factory)
    return _reconcile_in_unit_of_work(factory, menu_name, hierarchy_map).menu_id


def _reconcile_in_unit_of_work(
    factory: UnitOfWorkFactory,
    menu_name: str,
    hierarchy_map: HierarchyMap,
) -> ReconcileResult:
    with menu_sync_guard(menu_name), factory() as uow:
        result = _reconciler(uow.repositories).reconcile(menu_name, hierarchy_map)
        if result.ok:
            uow.commit()
        else:
            uow.rollback()
        return result


def _combined_hierarchy(
    index: PageRelationshipIndex,
    roots: list[str],
    max_depth: int,
) -> HierarchyMap:
    resolver = HierarchyResolver(index, max_depth=max_depth)
    combined = HierarchyMap()
    for root in roots:
        hierarchy = resolver.build(root)
        log.debug("Hierarchy for root %s has %d pages", normalize(root), len(hierarchy))
        combined.merge(hierarchy)
    combined.validate_invariants()
    return combined


def sync_navigation_menu(
    *,
    menu_name: str | None = None,
    config: NavigationConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> MenuSyncResult:
    """Build one hierarchy per root page and reconcile the configured menu."""

    cfg = config or get_navigation_config()
    effective_name = menu_name or cfg.menu_name
    factory = _unit_of_work_factory(unit_of_work_factory)
    log.info("Starting menu sync: menu=%r, max_depth=%d", effective_name, cfg.max_depth)
    return _sync_roots(factory, effective_name, cfg, extra_roots=())


def _sync_roots(
    factory: UnitOfWorkFactory,
    menu_name: str,
    cfg: NavigationConfig,
    *,
    extra_roots: tuple[str, ...],
) -> MenuSyncResult:
    with menu_sync_guard(menu_name), factory() as uow:
        repositories = uow.repositories
        roots = _merge_roots(extra_roots, find_root_pages(repositories.page_index))
        if not roots:
            raise NoRootPagesError("No root pages found. Sync some pages first.")
        log.info("Found %d root pages", len(roots))

        hierarchy = _combined_hierarchy(repositories.page_index, roots, cfg.max_depth)
        if not hierarchy:
            raise NoRootPagesError("Failed to build hierarchy map. No pages found.")

        result = _reconciler(repositories).reconcile(menu_name, hierarchy)
        if result.menu_id is None:
            uow.rollback()
            raise MenuCreationError(f"Failed to create or update menu {menu_name!r}")
        item_count = len(repositories.menus.list_items(result.menu_id))
        uow.commit()

    log.info(
        "Finished menu sync: menu=%r, items=%d, roots=%d, pages=%d",
        menu_name,
        item_count,
        len(roots),
        len(hierarchy),
    )
    return MenuSyncResult(
        menu_id=result.menu_id,
        menu_name=menu_name,
        item_count=item_count,
        roots=roots,
        pages=len(hierarchy),
        reconcile=result,
        hierarchy=hierarchy,
    )


def _merge_roots(first: tuple[str, ...], rest: list[str]) -> list[str]:
    merged: list[str] = []
    seen: set[str] = set()
    for external_id in (*first, *rest):
        key = normalize(external_id)
        if key not in seen:
            seen.add(key)
            merged.append(external_id)
    return merged


def handle_page_synced(
    event: PageSynced,
    *,
    title: str | None = None,
    order: int | None = None,
    config: NavigationConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    on_menu_synced: MenuSyncedListener | None = None,
) -> int | None:
    """Record a page's parent pointer, then refresh the navigation menu.

    The page's own root is always included, even when its topmost ancestor
    points at a parent that was never materialized locally.
    """

    cfg = config or get_navigation_config()
    factory = _unit_of_work_factory(unit_of_work_factory)
    with factory() as uow:
        record_page_sync(
            event,
            pages=uow.repositories.pages,
            normalize_parent_ids=cfg.normalize_parent_ids,
            title=title,
            order=order,
        )
        uow.commit()

    if not cfg.enabled:
        log.debug("Menu sync disabled, recorded page %s only", normalize(event.external_id))
        return None

    with factory() as uow:
        root = find_root(uow.repositories.page_index, event.external_id)

    try:
        result = _sync_roots(factory, cfg.menu_name, cfg, extra_roots=(root,))
    except MenuCreationError:
        log.warning("Menu %r unavailable, page %s recorded only", cfg.menu_name, root)
        return None
    if on_menu_synced is not None:
        on_menu_synced(result.menu_id, result.menu_name, result.hierarchy)
    return result.menu_id


def set_item_override(
    item_id: int,
    *,
    enabled: bool,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> None:
    """Freeze (or release) a menu item against automated reconciliation."""

    factory = _unit_of_work_factory(unit_of_work_factory)
    with factory() as uow:
        MenuItemStateStore(uow.repositories.menu_item_flags).set_override(item_id, enabled)
        uow.commit()
    log.info("Override %s for menu item %s", "enabled" if enabled else "cleared", item_id)


def mark_item_manual(
    item_id: int,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> None:
    """Take a menu item out of the synced lifecycle for good."""

    factory = _unit_of_work_factory(unit_of_work_factory)
    with factory() as uow:
        MenuItemStateStore(uow.repositories.menu_item_flags).mark_manual(item_id)
        uow.commit()
    log.info("Menu item %s marked as manual", item_id)


def describe_navigation(
    *,
    menu_name: str | None = None,
    config: NavigationConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> NavigationReport:
    """Collect the diagnostics shown by ``navsync debug``."""

    cfg = config or get_navigation_config()
    factory = _unit_of_work_factory(unit_of_work_factory)
    with factory() as uow:
        repositories = uow.repositories
        report = NavigationReport(
            menu_name=menu_name or cfg.menu_name,
            page_count=repositories.pages.count(),
        )
        resolver = HierarchyResolver(repositories.page_index, max_depth=cfg.max_depth)
        for root in find_root_pages(repositories.page_index):
            report.hierarchies[root] = resolver.build(root)
        report.menu_id = repositories.menus.find_menu(report.menu_name)
        if report.menu_id is not None:
            report.menu_item_count = len(repositories.menus.list_items(report.menu_id))
    return report
