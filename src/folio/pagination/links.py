"""Output paths and sibling links for paginated index pages."""

from __future__ import annotations


def normalize_base(base: str | None) -> str:
    """Return ``base`` without a leading slash and with one trailing slash.

    The site root stays the empty string.
    """
    stripped = (base or "").strip("/")
    return f"{stripped}/" if stripped else ""


def page_path(index: int, pagination_dir: str, base: str = "") -> str:
    """Return the output path of page ``index`` (1-based).

    Page 1 lives at the index root; later pages live under
    ``<base><pagination_dir>/<index>/``.

    Examples:
        >>> page_path(1, "page")
        ''
        >>> page_path(3, "page")
        'page/3/'
        >>> page_path(2, "/yo/", base="blog")
        'blog/yo/2/'

    """
    root = normalize_base(base)
    if index <= 1:
        return root
    segment = pagination_dir.strip("/")
    return f"{root}{segment}/{index}/" if segment else f"{root}{index}/"


def prev_link(current: int, pagination_dir: str, base: str = "") -> str:
    """Return the previous page's path, or ``""`` on the first page."""
    if current <= 1:
        return ""
    return page_path(current - 1, pagination_dir, base)


def next_link(current: int, total: int, pagination_dir: str, base: str = "") -> str:
    """Return the next page's path, or ``""`` on the last page."""
    if current >= total:
        return ""
    return page_path(current + 1, pagination_dir, base)
