"""Index domain configuration: where the search bundle is loaded from."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from SiteSearch.config.common import (
    check_non_empty,
    expect_float,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class IndexConfig:
    """Store validated search bundle location settings.

    Attributes:
        source: Effective bundle path or URL (environment override applied).
        source_env: Environment variable that overrides ``index.source``.
        language: Language key for multi-language bundles.
        timeout: HTTP timeout in seconds for remote bundles.
    """

    source: str
    source_env: str
    language: str
    timeout: float


def load_index(raw: Mapping[str, Any]) -> IndexConfig:
    """Load index domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "index", required=True)
    source = expect_str(get_required_value(section, "source", "index.source"), "index.source")
    source_env = expect_str(get_optional_value(section, "source_env", ""), "index.source_env")
    return IndexConfig(
        source=_source_from_env(source_env) or source,
        source_env=source_env,
        language=expect_str(get_optional_value(section, "language", "en"), "index.language"),
        timeout=expect_float(get_optional_value(section, "timeout", 30), "index.timeout"),
    )


def check_index(config: IndexConfig) -> None:
    """Validate index domain constraints.

    Raises:
        ValueError: If values violate index constraints.
    """
    check_non_empty(config.source, "index.source")
    check_non_empty(config.language, "index.language")
    if config.timeout <= 0:
        raise ValueError("index.timeout must be positive")


def _source_from_env(source_env: str) -> str:
    """Return the bundle source override from the environment, if any."""
    if not source_env.strip():
        return ""
    return os.getenv(source_env, "").strip()
