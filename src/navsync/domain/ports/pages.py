"""Ports for reading and recording page relationships."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from navsync.domain.model import Page


@runtime_checkable
class PageRelationshipIndex(Protocol):
    """Read-side view over locally materialized pages.

    Every lookup by external id must accept either textual shape, and
    ``children_of`` must match stored parent pointers written in either shape.
    """

    def find_local_id(self, external_id: str) -> int | None: ...

    def children_of(self, parent_external_id: str) -> Sequence[str]: ...

    def title_of(self, local_id: int) -> str: ...

    def order_of(self, local_id: int) -> int: ...

    def parent_of(self, external_id: str) -> str | None: ...

    def root_ids(self) -> Sequence[str]: ...


@runtime_checkable
class PageRepository(Protocol):
    """Write-side contract used by the sync trigger."""

    def add(self, page: Page) -> None: ...

    def get(self, local_id: int) -> Page | None: ...

    def get_by_external_id(self, external_id: str) -> Page | None: ...

    def count(self) -> int: ...
