"""Folio: split content collections into paginated index pages."""

from folio.config import FolioConfig, IndexGeneratorSettings, PaginationOptions, load_folio_config
from folio.data_primitives import ItemCollection, Post
from folio.pagination import Page, PageData, generate_index, paginate

__all__ = [
    "FolioConfig",
    "IndexGeneratorSettings",
    "ItemCollection",
    "Page",
    "PageData",
    "PaginationOptions",
    "Post",
    "generate_index",
    "load_folio_config",
    "paginate",
]
