"""Immutable, ordered item collections."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, overload

from folio.data_primitives.item import MISSING, get_field, is_hidden

logger = logging.getLogger(__name__)


def _is_absent(value: Any) -> bool:
    if isinstance(value, float) and math.isnan(value):
        return True
    return value is MISSING or value is None


def sort_records(items: Sequence[Any], field: str, *, descending: bool = False) -> tuple[Any, ...]:
    """Stable sort of ``items`` by ``field``.

    Items lacking the field (or holding ``None`` or NaN) keep their relative order
    and always come after the items that have it, whatever the direction.
    When present values cannot be compared, input order is returned.
    """
    present: list[tuple[Any, Any]] = []
    absent: list[Any] = []
    for item in items:
        value = get_field(item, field)
        if _is_absent(value):
            absent.append(item)
        else:
            present.append((value, item))

    if not present:
        return tuple(items)

    try:
        # sorted() keeps equal keys in input order even with reverse=True
        ordered = sorted(present, key=lambda pair: pair[0], reverse=descending)
    except TypeError:
        logger.warning("Values of field %r are not mutually comparable; keeping input order", field)
        return tuple(items)

    return tuple(item for _, item in ordered) + tuple(absent)


class ItemCollection(Sequence[Any]):
    """Ordered, read-only sequence of content items.

    Every operation returns a new collection; the wrapped items are never
    copied or mutated.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: tuple[Any, ...] = tuple(items)

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> ItemCollection: ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return ItemCollection(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ItemCollection):
            return self._items == other._items
        if isinstance(other, list | tuple):
            return self._items == tuple(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ItemCollection({list(self._items)!r})"

    def filter(self, predicate: Callable[[Any], bool]) -> ItemCollection:
        return ItemCollection(item for item in self._items if predicate(item))

    def visible(self) -> ItemCollection:
        """Return the collection without hidden items."""
        return self.filter(lambda item: not is_hidden(item))

    def sort_by(self, field: str, *, descending: bool = False) -> ItemCollection:
        """Return the collection stably sorted by ``field``.

        An empty or unknown field leaves the order untouched.
        """
        if not field:
            return self
        return ItemCollection(sort_records(self._items, field, descending=descending))

    def slice(self, start: int, stop: int | None = None) -> ItemCollection:
        """Return items in ``[start, stop)``."""
        return ItemCollection(self._items[start:stop])

    def limit(self, count: int) -> ItemCollection:
        return self.slice(0, count)

    def skip(self, count: int) -> ItemCollection:
        return self.slice(count)

    def eq(self, index: int) -> Any:
        """Return the item at ``index`` (negative indexes count from the end)."""
        return self._items[index]
