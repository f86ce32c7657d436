"""Menu reconciliation against a resolved page hierarchy.

Flow:
1) partition current items with the override policy
2) build the desired item tree from the hierarchy map (pure)
3) apply: create desired items, delete replaced ones, re-home orphans
"""

from __future__ import annotations

from .apply import ApplyResult, apply_plan
from .plan import DesiredItem, MenuPlan, Partition, build_desired_tree, partition_items, plan_menu
from .policy import OverridePolicy
from .reconciler import MenuReconciler, ReconcileResult

__all__ = [
    "ApplyResult",
    "DesiredItem",
    "MenuPlan",
    "MenuReconciler",
    "OverridePolicy",
    "Partition",
    "ReconcileResult",
    "apply_plan",
    "build_desired_tree",
    "partition_items",
    "plan_menu",
]
