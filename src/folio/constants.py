"""Default values shared by configuration and pagination."""

from __future__ import annotations

from typing import Final

DEFAULT_PER_PAGE: Final[int] = 10
DEFAULT_ORDER_BY: Final[str] = "-date"
DEFAULT_PAGINATION_DIR: Final[str] = "page"
DEFAULT_LAYOUT: Final[tuple[str, ...]] = ("index", "archive")
DEFAULT_INDEX_PATH: Final[str] = ""

# Prefix marking a descending order key, e.g. "-date"
DESCENDING_PREFIX: Final[str] = "-"
