"""External identifier normalization.

Upstream page ids are 32-character values that have historically been persisted
either compact (``2634dac9b96e813da15efd85567b68ff``) or separator-delimited in
the 8-4-4-4-12 pattern. Two ids are the same page iff their ``normalize``
results are identical. Anything that does not strip down to exactly 32
characters is treated as an opaque string and compared verbatim.
"""

from __future__ import annotations

from typing import Final

SEPARATOR: Final[str] = "-"
COMPACT_LENGTH: Final[int] = 32
GROUP_LENGTHS: Final[tuple[int, ...]] = (8, 4, 4, 4, 12)


def normalize(external_id: str) -> str:
    """Return the compact form of ``external_id``, or the input if it is malformed."""

    compact = external_id.replace(SEPARATOR, "")
    if len(compact) != COMPACT_LENGTH:
        return external_id
    return compact


def with_separators(external_id: str) -> str:
    """Render the 8-4-4-4-12 form, or return the input if it is malformed."""

    compact = external_id.replace(SEPARATOR, "")
    if len(compact) != COMPACT_LENGTH:
        return external_id
    groups: list[str] = []
    offset = 0
    for length in GROUP_LENGTHS:
        groups.append(compact[offset : offset + length])
        offset += length
    return SEPARATOR.join(groups)


def is_well_formed(external_id: str) -> bool:
    return len(external_id.replace(SEPARATOR, "")) == COMPACT_LENGTH


def lookup_shapes(external_id: str) -> tuple[str, ...]:
    """Every textual shape a stored pointer to ``external_id`` may have.

    Malformed ids only ever match themselves.
    """

    if not is_well_formed(external_id):
        return (external_id,)
    compact = normalize(external_id)
    return (compact, with_separators(compact))
