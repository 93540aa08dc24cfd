"""Configuration models, layered resolution and loading."""

from folio.config.exceptions import (
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    InvalidConfigurationValueError,
)
from folio.config.settings import (
    FolioConfig,
    IndexGeneratorSettings,
    PaginationOptions,
    find_folio_config,
    load_folio_config,
    resolve_setting,
)

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "FolioConfig",
    "IndexGeneratorSettings",
    "InvalidConfigurationValueError",
    "PaginationOptions",
    "find_folio_config",
    "load_folio_config",
    "resolve_setting",
]
