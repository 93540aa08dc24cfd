from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

from folio.data_primitives import ItemCollection, Post


@pytest.fixture
def posts() -> ItemCollection:
    """Three visible posts and one hidden post, in insertion order."""
    return ItemCollection(
        [
            Post(source="foo", slug="foo", date=1e8, metadata={"order": 0}),
            Post(source="bar", slug="bar", date=1e8 + 1, metadata={"order": 10}),
            Post(source="baz", slug="baz", date=1e8 - 1, metadata={"order": 1}),
            Post(source="qux", slug="qux", date=1e8 - 8, metadata={"order": 8}, hidden=True),
        ]
    )


@pytest.fixture
def visible_by_date(posts: ItemCollection) -> ItemCollection:
    """The visible posts, newest first."""
    return posts.visible().sort_by("date", descending=True)


@pytest.fixture
def clean_env():
    """Run the test without any FOLIO_* environment variables."""
    env = {key: value for key, value in os.environ.items() if not key.startswith("FOLIO_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def folio_logger():
    """Yield the package logger and undo any handler or level changes."""
    logger = logging.getLogger("folio")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
