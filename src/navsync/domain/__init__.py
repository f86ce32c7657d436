"""Domain layer: hierarchy resolution and menu reconciliation."""
