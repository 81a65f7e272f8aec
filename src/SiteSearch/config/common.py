from __future__ import annotations

"""Typed accessors shared by the per-domain config loaders.

Every error message names the dotted config key (``index.timeout``,
``categories[1].fragments``) so a bad YAML file points at the offending line.
"""

from typing import Any, Mapping


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return the ``key`` object of the root config.

    Missing optional sections come back as an empty mapping so loaders can
    apply their defaults uniformly.

    Raises:
        ValueError: If a required section is absent.
        TypeError: If the section is not an object.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_required_value(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    if field not in section:
        raise ValueError(f"Missing required config: {config_key}")
    return section[field]


def get_optional_value(section: Mapping[str, Any], field: str, default: Any) -> Any:
    return section.get(field, default)


def _expect(value: Any, config_key: str, kinds: tuple[type, ...], noun: str) -> Any:
    # bool is an int subclass; YAML `true` must not pass as a number.
    if isinstance(value, bool) and bool not in kinds:
        raise TypeError(f"{config_key} must be {noun}")
    if not isinstance(value, kinds):
        raise TypeError(f"{config_key} must be {noun}")
    return value


def expect_str(value: Any, config_key: str) -> str:
    return _expect(value, config_key, (str,), "a string")


def expect_bool(value: Any, config_key: str) -> bool:
    return _expect(value, config_key, (bool,), "a boolean")


def expect_float(value: Any, config_key: str) -> float:
    """Accept ints and floats (``timeout: 30`` and ``timeout: 2.5``)."""
    return float(_expect(value, config_key, (int, float), "a number"))


def expect_str_list(value: Any, config_key: str) -> list[str]:
    """Validate a YAML list whose items are all strings."""
    items = _expect(value, config_key, (list,), "a list")
    return [expect_str(item, f"{config_key}[{idx}]") for idx, item in enumerate(items)]


def check_non_empty(value: str, config_key: str) -> None:
    if not value.strip():
        raise ValueError(f"{config_key} must not be empty")
