"""Tests for the Rich logging configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from folio.config import FolioConfig
from folio.config.exceptions import InvalidConfigurationValueError
from folio.logging_setup import configure_logging, level_from_name
from folio.pagination import generate_index


def _managed_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h, RichHandler) and getattr(h, "_folio_managed", False)]


def test_installs_single_rich_handler(folio_logger):
    configure_logging("DEBUG")
    configure_logging("warning")

    assert len(_managed_handlers(folio_logger)) == 1
    assert folio_logger.level == logging.WARNING


def test_leaves_root_handlers_alone(folio_logger):
    root_handlers = list(logging.getLogger().handlers)

    configure_logging()

    assert logging.getLogger().handlers == root_handlers


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("debug", logging.DEBUG),
        (" ERROR ", logging.ERROR),
        (logging.WARNING, logging.WARNING),
        ("chatty", logging.INFO),
    ],
)
def test_level_from_name(level, expected):
    assert level_from_name(level) == expected


def test_generate_index_applies_configured_level(posts, folio_logger, clean_env):
    generate_index(posts, FolioConfig(log_level="debug"))

    assert folio_logger.level == logging.DEBUG
    assert len(_managed_handlers(folio_logger)) == 1


def test_generate_index_without_level_leaves_logging_alone(posts, folio_logger, clean_env):
    generate_index(posts, FolioConfig())

    assert _managed_handlers(folio_logger) == []


def test_log_level_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv("FOLIO_LOG_LEVEL", "info")

    assert FolioConfig().log_level == "INFO"


def test_unknown_log_level_is_rejected(clean_env):
    with pytest.raises(ValidationError, match="Unknown log level") as exc_info:
        FolioConfig(log_level="chatty")

    assert isinstance(exc_info.value.errors()[0]["ctx"]["error"], InvalidConfigurationValueError)
