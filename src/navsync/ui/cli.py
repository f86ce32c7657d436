# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from navsync.app import (
    NavigationReport,
    describe_navigation,
    handle_page_synced,
    mark_item_manual,
    set_item_override,
    sync_navigation_menu,
)
from navsync.config import ConfigurationError, configure_logging, get_navigation_config
from navsync.domain.model import PageSynced

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from navsync.config import NavigationConfig
    from navsync.domain.model import HierarchyMap, PageNode

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronise the navigation menu")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Rebuild the menu from every root page")
    sync.add_argument(
        "--menu-name",
        type=str,
        help="Menu to reconcile (defaults to config)",
    )

    debug = subparsers.add_parser("debug", help="Show synced pages and resolved hierarchies")
    debug.add_argument(
        "--menu-name",
        type=str,
        help="Menu to inspect (defaults to config)",
    )
    debug.add_argument(
        "--verbose",
        action="store_true",
        help="Print the full page tree below every root",
    )

    page = subparsers.add_parser("page-synced", help="Record a synced page and refresh the menu")
    page.add_argument("--local-id", type=int, required=True, help="Local content item id")
    page.add_argument("--external-id", type=str, required=True, help="Upstream page id")
    page.add_argument("--parent-external-id", type=str, help="Upstream parent page id")
    page.add_argument("--title", type=str, help="Page title to store")
    page.add_argument("--order", type=int, help="Sibling order hint")

    item = subparsers.add_parser("item", help="Menu item flag commands")
    item_sub = item.add_subparsers(dest="item_command", required=True)
    override = item_sub.add_parser("override", help="Protect an item from reconciliation")
    override.add_argument("item_id", type=int, help="Menu item id")
    override.add_argument(
        "--off",
        action="store_true",
        help="Clear the override instead of setting it",
    )
    manual = item_sub.add_parser("manual", help="Mark an item as manually added")
    manual.add_argument("item_id", type=int, help="Menu item id")

    return parser.parse_args(list(argv))


def _validate(args: argparse.Namespace) -> None:
    if args.command == "page-synced":
        if args.local_id <= 0:
            raise ValueError("--local-id must be positive")
        if not args.external_id.strip():
            raise ValueError("--external-id must not be blank")
    if args.command == "item" and args.item_id <= 0:
        raise ValueError("Menu item id must be positive")
    if getattr(args, "menu_name", None) is not None and not args.menu_name.strip():
        raise ValueError("--menu-name must not be blank")


def _print_tree(hierarchy: HierarchyMap, node: PageNode, depth: int = 0) -> None:
    prefix = "  " * depth + ("└─ " if depth else "")
    print(f"{prefix}{node.title or '(untitled)'} [{node.external_id}] (content {node.local_id})")
    for child in hierarchy.children_of(node):
        _print_tree(hierarchy, child, depth + 1)


def _print_report(report: NavigationReport, *, verbose: bool) -> None:
    print(f"Synced pages: {report.page_count}")
    print(f"Root pages: {len(report.hierarchies)}")
    for root, hierarchy in report.hierarchies.items():
        print(f"- {root}: {len(hierarchy)} pages in hierarchy")
        if verbose:
            for node in hierarchy.roots():
                _print_tree(hierarchy, node, 1)
    print(f"Total pages across hierarchies: {report.total_pages}")
    if report.menu_id is None:
        print(f"Menu {report.menu_name!r} does not exist yet")
    else:
        print(
            f"Menu {report.menu_name!r} (id={report.menu_id}) has "
            f"{report.menu_item_count} items"
        )


def _run(args: argparse.Namespace, config: NavigationConfig) -> None:
    if args.command == "sync":
        result = sync_navigation_menu(menu_name=args.menu_name, config=config)
        log.info(
            "Menu sync finished: menu=%r, id=%s, items=%s, roots=%s, pages=%s",
            result.menu_name,
            result.menu_id,
            result.item_count,
            len(result.roots),
            result.pages,
        )
    elif args.command == "debug":
        report = describe_navigation(menu_name=args.menu_name, config=config)
        _print_report(report, verbose=args.verbose)
    elif args.command == "page-synced":
        event = PageSynced(
            local_id=args.local_id,
            external_id=args.external_id,
            parent_external_id=args.parent_external_id,
        )
        menu_id = handle_page_synced(event, title=args.title, order=args.order, config=config)
        log.info("Page %s recorded, menu id %s", args.external_id, menu_id)
    elif args.command == "item" and args.item_command == "override":
        set_item_override(args.item_id, enabled=not args.off)
    elif args.command == "item" and args.item_command == "manual":
        mark_item_manual(args.item_id)
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        configure_logging()
        parsed_args = _parse_args(args_list)
        _validate(parsed_args)
        config = get_navigation_config()
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        _run(parsed_args, config)
    except Exception:
        log.exception("Fatal error during menu sync")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    signal(SIGINT, sigint_handler)
    main()
