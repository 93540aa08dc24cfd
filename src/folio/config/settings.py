"""Centralized configuration for Folio.

This module holds all configuration code:
- Pydantic models for .folio/folio.toml
- Loading function with environment overrides
- The resolved runtime options handed to the paginator

Configuration priority (highest to lowest):
1. Environment variables (FOLIO_SECTION__KEY)
2. Config file (.folio/folio.toml)
3. Defaults
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from folio.config.exceptions import ConfigParseError, ConfigValidationError, InvalidConfigurationValueError
from folio.constants import (
    DEFAULT_INDEX_PATH,
    DEFAULT_LAYOUT,
    DEFAULT_ORDER_BY,
    DEFAULT_PAGINATION_DIR,
    DEFAULT_PER_PAGE,
)

logger = logging.getLogger(__name__)

_ENV_PREFIX = "FOLIO_"
CONFIG_DIR_NAME = ".folio"
CONFIG_FILE_NAME = "folio.toml"

T = TypeVar("T")


def resolve_setting(local: T | None, global_: T | None, default: T) -> T:
    """Return the first value that is set, checking ``local`` then ``global_``.

    ``None`` and the empty string both count as unset.
    """
    for candidate in (local, global_):
        if candidate is not None and candidate != "":
            return candidate
    return default


@dataclass(frozen=True, slots=True)
class PaginationOptions:
    """Fully resolved options for one pagination run."""

    per_page: int = DEFAULT_PER_PAGE
    order_by: str = DEFAULT_ORDER_BY
    pagination_dir: str = DEFAULT_PAGINATION_DIR
    layout: tuple[str, ...] = DEFAULT_LAYOUT
    base: str = DEFAULT_INDEX_PATH


class IndexGeneratorSettings(BaseModel):
    """Settings for the index page generator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    per_page: int = Field(
        default=DEFAULT_PER_PAGE,
        ge=0,
        description="Posts per index page (0 disables pagination)",
    )
    order_by: str = Field(
        default=DEFAULT_ORDER_BY,
        description="Sort field; a leading '-' sorts descending (e.g. '-date')",
    )
    pagination_dir: str | None = Field(
        default=None,
        description="Path segment for pages 2+; overrides the site-wide setting when set",
    )
    layout: tuple[str, ...] = Field(
        default=DEFAULT_LAYOUT,
        description="Layouts tried in order when rendering an index page",
    )
    path: str = Field(
        default=DEFAULT_INDEX_PATH,
        description="Base path of the index, relative to the site root",
    )

    @field_validator("order_by")
    @classmethod
    def strip_order_by(cls, v: str) -> str:
        return v.strip()

    @field_validator("layout")
    @classmethod
    def validate_layout(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject an empty layout chain or blank layout names."""
        if not v:
            msg = "layout must name at least one template"
            raise InvalidConfigurationValueError(msg)
        if any(not name.strip() for name in v):
            msg = f"layout contains a blank template name: {list(v)!r}"
            raise InvalidConfigurationValueError(msg)
        return v

    def resolve(self, global_pagination_dir: str | None = None) -> PaginationOptions:
        """Resolve these settings against the site-wide pagination directory."""
        return PaginationOptions(
            per_page=self.per_page,
            order_by=self.order_by,
            pagination_dir=resolve_setting(self.pagination_dir, global_pagination_dir, DEFAULT_PAGINATION_DIR),
            layout=tuple(self.layout),
            base=self.path,
        )


class FolioConfig(BaseSettings):
    """Root configuration for Folio.

    Supports environment variable overrides with the pattern:
    FOLIO_SECTION__KEY (e.g., FOLIO_INDEX_GENERATOR__PER_PAGE)
    """

    pagination_dir: str | None = Field(
        default=DEFAULT_PAGINATION_DIR,
        description="Site-wide path segment for pages 2+",
    )
    index_generator: IndexGeneratorSettings = Field(
        default_factory=IndexGeneratorSettings,
        description="Index generator settings",
    )
    log_level: str | None = Field(
        default=None,
        description="Level for the folio console log handler; unset leaves logging to the host",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        frozen=True,
        env_prefix=_ENV_PREFIX,
        env_nested_delimiter="__",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        if v is None:
            return None
        name = v.strip().upper()
        if name not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {v!r}"
            raise InvalidConfigurationValueError(msg)
        return name

    def pagination_options(self) -> PaginationOptions:
        """Return the index generator options with overrides applied."""
        return self.index_generator.resolve(self.pagination_dir)


# ============================================================================
# Configuration Loading
# ============================================================================


def find_folio_config(start_dir: Path) -> Path | None:
    """Search upward for .folio/folio.toml.

    Args:
        start_dir: Starting directory for upward search

    Returns:
        Path to the config file if found, else None

    """
    current = start_dir.expanduser().resolve()
    for candidate in (current, *current.parents):
        config_path = candidate / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
    return None


def _collect_env_override_paths() -> set[tuple[str, ...]]:
    """Return the set of config paths defined via environment variables."""
    env_paths: set[tuple[str, ...]] = set()
    for key in os.environ:
        if not key.upper().startswith(_ENV_PREFIX):
            continue
        parts = [part.lower() for part in key[len(_ENV_PREFIX) :].split("__") if part]
        if parts:
            env_paths.add(tuple(parts))
    return env_paths


def _drop_env_overrides(
    data: dict[str, Any],
    env_override_paths: set[tuple[str, ...]],
    current_path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Remove keys from file data that are also provided via env vars."""
    kept: dict[str, Any] = {}
    for key, value in data.items():
        path = (*current_path, str(key).lower())
        if path in env_override_paths:
            continue
        if isinstance(value, dict):
            kept[key] = _drop_env_overrides(value, env_override_paths, path)
        else:
            kept[key] = value
    return kept


def load_folio_config(site_root: Path | None = None) -> FolioConfig:
    """Load Folio configuration from .folio/folio.toml.

    Args:
        site_root: Directory to start searching from. If None, uses the
            current working directory.

    Returns:
        Validated FolioConfig instance (defaults plus env overrides when no
        file exists)

    Raises:
        ConfigParseError: If the file is not valid TOML
        ConfigValidationError: If the file or environment hold invalid data

    """
    if site_root is None:
        site_root = Path.cwd()

    config_path = find_folio_config(site_root)
    file_data: dict[str, Any] = {}

    if config_path is None:
        logger.info("No %s/%s found under %s, using defaults", CONFIG_DIR_NAME, CONFIG_FILE_NAME, site_root)
    else:
        logger.info("Loading config from %s", config_path)
        try:
            raw_config = config_path.read_text(encoding="utf-8")
        except OSError:
            logger.exception("Failed to read config from %s", config_path)
            raise

        try:
            file_data = tomllib.loads(raw_config)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(config_path, str(e)) from e

    # Env Vars > Config File > Defaults
    file_data = _drop_env_overrides(file_data, _collect_env_override_paths())

    try:
        return FolioConfig(**file_data)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(location_part) for location_part in error["loc"])
            logger.error("  %s: %s", loc, error["msg"])
        raise ConfigValidationError(e.errors()) from e


__all__ = [
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "FolioConfig",
    "IndexGeneratorSettings",
    "PaginationOptions",
    "find_folio_config",
    "load_folio_config",
    "resolve_setting",
]
