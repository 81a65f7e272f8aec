"""Category taxonomy configuration."""

from __future__ import annotations

from typing import Any, Mapping

from SiteSearch.config.common import (
    check_non_empty,
    expect_str,
    expect_str_list,
    get_required_value,
)
from SiteSearch.core.categories import Category, CategoryTaxonomy


def load_categories(raw: Mapping[str, Any]) -> CategoryTaxonomy:
    """Load the ordered category taxonomy from the ``categories`` list.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or keys repeat.
    """
    items = raw.get("categories")
    if items is None:
        raise ValueError("Missing required config: categories")
    if not isinstance(items, list):
        raise TypeError("categories must be a list")

    categories: list[Category] = []
    seen: set[str] = set()
    for idx, item in enumerate(items):
        config_key = f"categories[{idx}]"
        category = _parse_category(item, config_key)
        if category.key in seen:
            raise ValueError(f"{config_key}.key is duplicated: {category.key}")
        if not category.fragments:
            raise ValueError(f"{config_key}.fragments must include at least one fragment")
        seen.add(category.key)
        categories.append(category)
    return CategoryTaxonomy(categories=tuple(categories))


def check_categories(taxonomy: CategoryTaxonomy) -> None:
    """Validate taxonomy constraints.

    Raises:
        ValueError: If values violate taxonomy constraints.
    """
    if not taxonomy.categories:
        raise ValueError("categories must include at least one category")
    for idx, category in enumerate(taxonomy.categories):
        check_non_empty(category.key, f"categories[{idx}].key")
        check_non_empty(category.label, f"categories[{idx}].label")


def _parse_category(value: Any, config_key: str) -> Category:
    """Parse one ``{key, label, fragments}`` mapping."""
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")

    key = expect_str(get_required_value(value, "key", f"{config_key}.key"), f"{config_key}.key").strip()
    label = expect_str(value.get("label", key), f"{config_key}.label").strip()
    fragments = expect_str_list(
        get_required_value(value, "fragments", f"{config_key}.fragments"),
        f"{config_key}.fragments",
    )
    return Category(
        key=key,
        label=label,
        fragments=tuple(fragment.strip() for fragment in fragments if fragment.strip()),
    )
