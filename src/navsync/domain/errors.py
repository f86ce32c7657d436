"""Error taxonomy for navigation sync."""

from __future__ import annotations


class NavigationSyncError(RuntimeError):
    """Base class for navigation sync failures."""


class LookupMissError(NavigationSyncError):
    """A page or content item could not be found locally.

    Recoverable: the resolver and reconciler drop the affected branch.
    """


class MenuCreationError(NavigationSyncError):
    """The menu store could not get or create the named menu."""


class MenuItemCreationError(LookupMissError):
    """The menu store could not create an item (usually a vanished content item)."""


class ReconciliationInProgressError(NavigationSyncError):
    """Another reconciliation for the same menu is already running."""


class NoRootPagesError(NavigationSyncError):
    """No root pages are available to build a menu from."""
