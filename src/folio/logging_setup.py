"""Rich console logging for the ``folio`` package logger.

Hosts that already route logging elsewhere can ignore this module; folio
only installs its handler when asked to, either directly or through
``FolioConfig.log_level``.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["PACKAGE_LOGGER", "configure_logging", "console", "level_from_name"]

PACKAGE_LOGGER = "folio"

console = Console(stderr=True)


def level_from_name(level: int | str) -> int:
    """Return the numeric level for ``level``; unknown names map to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def _managed_handler(logger: logging.Logger) -> RichHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, RichHandler) and getattr(handler, "_folio_managed", False):
            return handler
    return None


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach one Rich handler to the ``folio`` logger and set its level.

    Repeated calls only change the level. Handlers owned by the host, on the
    root logger or elsewhere, are left alone.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _managed_handler(logger) is None:
        handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._folio_managed = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(level_from_name(level))
    return logger
