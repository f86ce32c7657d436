"""Hierarchy resolution over the page relationship index."""

from __future__ import annotations

from .resolver import HierarchyResolver
from .roots import find_root, find_root_pages

__all__ = ["HierarchyResolver", "find_root", "find_root_pages"]
