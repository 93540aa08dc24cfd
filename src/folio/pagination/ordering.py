"""Order-key parsing and collection ordering for index pages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from folio.constants import DESCENDING_PREFIX
from folio.data_primitives.item import sticky_rank
from folio.data_primitives.protocols import ContentStore

StoreT = TypeVar("StoreT", bound=ContentStore)


@dataclass(frozen=True, slots=True)
class OrderSpec:
    """A sort field and its direction. An empty field means input order."""

    field: str = ""
    descending: bool = False


def parse_order_by(order_by: str | None) -> OrderSpec:
    """Parse an order key such as ``"-date"`` or ``"order"``.

    Examples:
        >>> parse_order_by("-date")
        OrderSpec(field='date', descending=True)
        >>> parse_order_by("title")
        OrderSpec(field='title', descending=False)
        >>> parse_order_by("-")
        OrderSpec(field='', descending=True)

    """
    key = (order_by or "").strip()
    descending = key.startswith(DESCENDING_PREFIX)
    if descending:
        key = key[len(DESCENDING_PREFIX) :].strip()
    return OrderSpec(field=key, descending=descending)


def apply_order(store: StoreT, spec: OrderSpec) -> StoreT:
    """Return ``store`` sorted by ``spec``; unknown fields keep input order."""
    if not spec.field:
        return store
    return store.sort_by(spec.field, descending=spec.descending)


def pin_sticky(items: Iterable[Any]) -> list[Any]:
    """Move items with a higher ``sticky`` rank ahead, keeping order otherwise."""
    return sorted(items, key=sticky_rank, reverse=True)
