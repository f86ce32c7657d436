"""Page ids used across the navigation tests."""

from __future__ import annotations

ROOT_COMPACT = "2634dac9b96e813da15efd85567b68ff"
ROOT_DASHED = "2634dac9-b96e-813d-a15e-fd85567b68ff"
CHILD_COMPACT = "1111a222b333c444d555e666f777g888"
CHILD_DASHED = "1111a222-b333-c444-d555-e666f777g888"
SIBLING_COMPACT = "3333c444d555e666f777a888b999c000"
GRANDCHILD_COMPACT = "4444d555e666f777a888b999c000d111"
OTHER_ROOT_COMPACT = "5555e666f777a888b999c000d111e222"


def page_id(number: int) -> str:
    """Deterministic 32-character page id for ``number``."""

    return f"{number:032x}"
