"""Content items and the collections that hold them.

- **Items**: ``Post`` plus field lookup helpers that accept any record shape
- **Collections**: ``ItemCollection``, the shipped ``ContentStore``
"""

from folio.data_primitives.collection import ItemCollection, sort_records
from folio.data_primitives.item import MISSING, Post, get_field, is_hidden, sticky_rank
from folio.data_primitives.protocols import ContentStore

__all__ = [
    "MISSING",
    "ContentStore",
    "ItemCollection",
    "Post",
    "get_field",
    "is_hidden",
    "sort_records",
    "sticky_rank",
]
