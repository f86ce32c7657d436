"""Navigation menu sync settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_flag, env_int, optional_env_var

DEFAULT_MENU_NAME: Final[str] = "Synced Navigation"
DEFAULT_MAX_DEPTH: Final[int] = 5
MIN_MAX_DEPTH: Final[int] = 1
MAX_MAX_DEPTH: Final[int] = 10


def clamp_max_depth(value: int) -> int:
    return max(MIN_MAX_DEPTH, min(MAX_MAX_DEPTH, value))


@dataclass(frozen=True, slots=True)
class NavigationConfig:
    menu_name: str = DEFAULT_MENU_NAME
    enabled: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH
    # Legacy rows may hold either id shape; this only affects new writes.
    normalize_parent_ids: bool = True


def get_navigation_config() -> NavigationConfig:
    return NavigationConfig(
        menu_name=optional_env_var("NAVSYNC_MENU_NAME") or DEFAULT_MENU_NAME,
        enabled=env_flag("NAVSYNC_MENU_ENABLED", default=True),
        max_depth=clamp_max_depth(env_int("NAVSYNC_MAX_DEPTH", default=DEFAULT_MAX_DEPTH)),
        normalize_parent_ids=env_flag("NAVSYNC_NORMALIZE_PARENT_IDS", default=True),
    )
