from __future__ import annotations

"""Public configuration API for SiteSearch."""

from SiteSearch.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from SiteSearch.config.index import IndexConfig
from SiteSearch.config.output import OutputConfig
from SiteSearch.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "IndexConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
