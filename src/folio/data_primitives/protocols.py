"""Capability contracts the pagination engine depends on."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class ContentStore(Protocol):
    """Contract for an ordered, sliceable source of content items.

    The paginator only needs these operations, so any backend (an in-memory
    collection, a database-backed query set, a lazy loader) can be paginated
    as long as each call returns a new store rather than mutating itself.
    """

    def visible(self) -> Self:
        """Return the store without hidden items."""

    def sort_by(self, field: str, *, descending: bool = False) -> Self:
        """Return the store stably ordered by ``field``."""

    def slice(self, start: int, stop: int | None = None) -> Self:
        """Return the contiguous range ``[start, stop)``."""

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Any]: ...
