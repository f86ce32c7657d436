from __future__ import annotations

import pytest

from navsync.domain.identifiers import (
    is_well_formed,
    lookup_shapes,
    normalize,
    with_separators,
)
from tests.helpers.pages import CHILD_COMPACT, CHILD_DASHED, ROOT_COMPACT, ROOT_DASHED


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (ROOT_DASHED, ROOT_COMPACT),
        (ROOT_COMPACT, ROOT_COMPACT),
        (CHILD_DASHED, CHILD_COMPACT),
        ("not-an-id", "not-an-id"),
        ("", ""),
    ],
)
def test_normalize(raw: str, expected: str) -> None:
    assert normalize(raw) == expected


def test_normalize_is_idempotent() -> None:
    assert normalize(normalize(ROOT_DASHED)) == normalize(ROOT_DASHED)


def test_with_separators_renders_groups() -> None:
    assert with_separators(CHILD_COMPACT) == CHILD_DASHED
    assert with_separators(CHILD_DASHED) == CHILD_DASHED


def test_with_separators_leaves_malformed_ids_alone() -> None:
    assert with_separators("abc-def") == "abc-def"


def test_ids_are_not_required_to_be_hex() -> None:
    assert is_well_formed(CHILD_COMPACT)
    assert "g" in CHILD_COMPACT


def test_lookup_shapes() -> None:
    assert lookup_shapes(CHILD_DASHED) == (CHILD_COMPACT, CHILD_DASHED)
    assert lookup_shapes(CHILD_COMPACT) == (CHILD_COMPACT, CHILD_DASHED)
    assert lookup_shapes("short") == ("short",)
