"""Split a content collection into index pages.

The paginator is a pure function: it filters hidden items, orders the rest,
and slices them into pages, each carrying the data a template needs to
render it (the page's items, its position, and links to its neighbours).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from folio.config.settings import FolioConfig, PaginationOptions
from folio.data_primitives.collection import ItemCollection
from folio.data_primitives.item import sticky_rank
from folio.data_primitives.protocols import ContentStore
from folio.logging_setup import configure_logging
from folio.pagination.links import next_link, normalize_base, page_path, prev_link
from folio.pagination.ordering import apply_order, parse_order_by, pin_sticky

logger = logging.getLogger(__name__)

INDEX_MARKER_KEY = "__index"


@dataclass(frozen=True, slots=True)
class PageData:
    """Template data for one index page."""

    base: str
    total: int
    current: int
    current_url: str
    posts: ContentStore
    prev: int = 0
    prev_link: str = ""
    next: int = 0
    next_link: str = ""
    index: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return the mapping handed to template engines."""
        return {
            "base": self.base,
            "total": self.total,
            "current": self.current,
            "current_url": self.current_url,
            "posts": self.posts,
            "prev": self.prev,
            "prev_link": self.prev_link,
            "next": self.next,
            "next_link": self.next_link,
            INDEX_MARKER_KEY: self.index,
        }


@dataclass(frozen=True, slots=True)
class Page:
    """One rendered unit: where it goes, how it looks, what it shows."""

    path: str
    layout: tuple[str, ...]
    data: PageData


def _as_store(items: ContentStore | Iterable[Any]) -> ContentStore:
    if isinstance(items, ContentStore):
        return items
    return ItemCollection(items)


def _page_count(count: int, per_page: int) -> int:
    if per_page == 0:
        return 1
    return max(1, math.ceil(count / per_page))


def paginate(items: ContentStore | Iterable[Any], options: PaginationOptions | None = None) -> list[Page]:
    """Partition ``items`` into index pages.

    Args:
        items: The full collection, hidden items included.
        options: Resolved pagination options; defaults when omitted.

    Returns:
        Pages in ascending order. There is always at least one page, even
        for an empty collection.

    """
    options = options or PaginationOptions()

    per_page = options.per_page
    if per_page < 0:
        logger.warning("per_page=%s is negative; disabling pagination", per_page)
        per_page = 0

    store = apply_order(_as_store(items).visible(), parse_order_by(options.order_by))
    if any(sticky_rank(item) for item in store):
        store = ItemCollection(pin_sticky(store))

    count = len(store)
    total = _page_count(count, per_page)
    base = normalize_base(options.base)
    layout = tuple(options.layout)

    pages: list[Page] = []
    for current in range(1, total + 1):
        if per_page:
            posts = store.slice((current - 1) * per_page, current * per_page)
        else:
            posts = store

        path = page_path(current, options.pagination_dir, base)
        data = PageData(
            base=base,
            total=total,
            current=current,
            current_url=path,
            posts=posts,
            prev=current - 1 if current > 1 else 0,
            prev_link=prev_link(current, options.pagination_dir, base),
            next=current + 1 if current < total else 0,
            next_link=next_link(current, total, options.pagination_dir, base),
        )
        pages.append(Page(path=path, data=data, layout=layout))

    logger.debug("Paginated %d item(s) into %d page(s) (per_page=%d)", count, total, per_page)
    return pages


def generate_index(items: ContentStore | Iterable[Any], config: FolioConfig | None = None) -> list[Page]:
    """Build the site's index pages from ``items`` using ``config``.

    When ``config.log_level`` is set, folio's console handler is installed at
    that level first.
    """
    if config is None:
        config = FolioConfig()
    if config.log_level is not None:
        configure_logging(config.log_level)
    return paginate(items, config.pagination_options())
