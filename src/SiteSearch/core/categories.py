"""Category taxonomy and result filtering.

A taxonomy maps each category key to path fragments. A result belongs to a
category when its reference contains one of the category's fragments.
Filtering is keyed by category, so any number of categories is supported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from SiteSearch.core.errors import InvalidSelectionKey
from SiteSearch.core.models import ResultEntry

CategorySelection = Mapping[str, bool]


@dataclass(frozen=True, slots=True)
class Category:
    """One content category.

    Attributes:
        key: Stable selection key (e.g. "docs").
        label: Display label (e.g. "Docs").
        fragments: Path fragments identifying membership by substring match.
    """

    key: str
    label: str
    fragments: tuple[str, ...]

    def matches(self, reference: str) -> bool:
        return any(fragment in reference for fragment in self.fragments)


@dataclass(frozen=True, slots=True)
class CategoryTaxonomy:
    """Ordered, closed set of categories supplied by configuration."""

    categories: tuple[Category, ...]

    def __post_init__(self) -> None:
        keys = [category.key for category in self.categories]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate category keys: {keys}")
        for category in self.categories:
            # An empty fragment is a substring of every reference.
            if not category.fragments or any(not fragment for fragment in category.fragments):
                raise ValueError(f"Category {category.key!r} needs non-empty fragments")

    @classmethod
    def from_mapping(
        cls,
        fragments: Mapping[str, Sequence[str]],
        labels: Mapping[str, str] | None = None,
    ) -> CategoryTaxonomy:
        """Build a taxonomy from ``{key: [fragment, ...]}`` in mapping order."""
        labels = labels or {}
        return cls(
            categories=tuple(
                Category(key=key, label=labels.get(key, key), fragments=tuple(values))
                for key, values in fragments.items()
            )
        )

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(category.key for category in self.categories)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(category.label for category in self.categories)

    def get(self, key: str) -> Category:
        """Return the category for ``key``.

        Raises:
            InvalidSelectionKey: If the taxonomy has no such key.
        """
        for category in self.categories:
            if category.key == key:
                return category
        raise InvalidSelectionKey(key, self.keys)

    def fragments_for(self, key: str) -> tuple[str, ...]:
        return self.get(key).fragments

    def new_selection(self) -> dict[str, bool]:
        """Return the initial selection: every category inactive."""
        return {key: False for key in self.keys}

    def validate_selection(self, selection: CategorySelection) -> None:
        """Reject selections that use keys outside the taxonomy.

        Raises:
            InvalidSelectionKey: For the first unknown key.
        """
        known = set(self.keys)
        for key in selection:
            if key not in known:
                raise InvalidSelectionKey(key, self.keys)

    def toggle(self, selection: CategorySelection, key: str) -> dict[str, bool]:
        """Return a copy of ``selection`` with ``key`` flipped."""
        self.validate_selection(selection)
        self.get(key)
        updated = dict(self.new_selection())
        updated.update(selection)
        updated[key] = not updated[key]
        return updated

    def activate(self, selection: CategorySelection, key: str) -> dict[str, bool]:
        """Return a copy of ``selection`` with ``key`` set active."""
        self.validate_selection(selection)
        self.get(key)
        updated = dict(self.new_selection())
        updated.update(selection)
        updated[key] = True
        return updated

    def active_categories(self, selection: CategorySelection) -> tuple[Category, ...]:
        self.validate_selection(selection)
        return tuple(category for category in self.categories if selection.get(category.key, False))


def filter_results(
    results: Sequence[ResultEntry],
    selection: CategorySelection,
    taxonomy: CategoryTaxonomy,
) -> list[ResultEntry]:
    """Keep results that belong to at least one active category.

    Args:
        results: Ordered search results.
        selection: Category key to active flag.
        taxonomy: Category definitions.

    Returns:
        All results when no category is active, otherwise the matching
        results in their original order.

    Raises:
        InvalidSelectionKey: If ``selection`` uses a key unknown to ``taxonomy``.
    """
    active = taxonomy.active_categories(selection)
    if not active:
        return list(results)
    return [entry for entry in results if any(category.matches(entry.reference) for category in active)]


@dataclass(frozen=True, slots=True)
class CategoryFilter:
    """Filter entrypoint bound to a configured taxonomy."""

    taxonomy: CategoryTaxonomy

    def new_selection(self) -> dict[str, bool]:
        return self.taxonomy.new_selection()

    def apply(self, results: Sequence[ResultEntry], selection: CategorySelection) -> list[ResultEntry]:
        return filter_results(results, selection, self.taxonomy)
