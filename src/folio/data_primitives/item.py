"""Content items and field lookup used by the pagination engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Final


class _Missing:
    """Sentinel type for a field an item does not carry."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


@dataclass(frozen=True, slots=True)
class Post:
    """A publishable content record.

    Only ``hidden`` and ``sticky`` have meaning to the paginator; every other
    attribute, and every key of ``metadata``, is just a sortable field.
    """

    source: str
    slug: str
    date: datetime | float | None = None
    title: str | None = None
    hidden: bool = False
    sticky: int = 0
    metadata: Mapping[str, Any] = field(default_factory=dict)


def get_field(item: Any, name: str) -> Any:
    """Return ``item``'s value for ``name`` or ``MISSING``.

    Mappings are looked up by key, other objects by attribute. Objects that
    expose a ``metadata`` mapping are searched there as a fallback, which is
    how front matter keys on a ``Post`` become sortable.
    """
    if not name:
        return MISSING

    if isinstance(item, Mapping):
        return item.get(name, MISSING)

    value = getattr(item, name, MISSING)
    if value is not MISSING:
        return value

    metadata = getattr(item, "metadata", None)
    if isinstance(metadata, Mapping):
        return metadata.get(name, MISSING)
    return MISSING


def is_hidden(item: Any) -> bool:
    """Return True when the item must be excluded from listings."""
    value = get_field(item, "hidden")
    return value is not MISSING and bool(value)


def sticky_rank(item: Any) -> int | float:
    """Return the pin rank of ``item`` (0 when absent or not numeric)."""
    value = get_field(item, "sticky")
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        return value
    return 0
