"""Index pagination: ordering, slicing and page links."""

from folio.pagination.links import next_link, page_path, prev_link
from folio.pagination.ordering import OrderSpec, apply_order, parse_order_by, pin_sticky
from folio.pagination.paginator import Page, PageData, generate_index, paginate

__all__ = [
    "OrderSpec",
    "Page",
    "PageData",
    "apply_order",
    "generate_index",
    "next_link",
    "page_path",
    "paginate",
    "parse_order_by",
    "pin_sticky",
    "prev_link",
]
