"""Per-session search state held by the hosting UI layer.

The session owns the current query text, the last accepted search results
and the category selection. Search results and the displayed list are two
separate derived values, recomputed when their inputs change.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from SiteSearch.core.categories import CategoryFilter
from SiteSearch.core.models import ResultEntry
from SiteSearch.services.search import SiteSearchService


@dataclass(slots=True)
class SearchSession:
    """Explicit search state: query -> results, (results, selection) -> displayed."""

    service: SiteSearchService
    category_filter: CategoryFilter
    query: str = ""
    results: list[ResultEntry] = field(default_factory=list)
    selection: dict[str, bool] = field(default_factory=dict)
    _generation: int = field(default=0, init=False, repr=False)
    _accepted: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.selection:
            self.selection = self.category_filter.new_selection()
        else:
            self.category_filter.taxonomy.validate_selection(self.selection)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def displayed(self) -> list[ResultEntry]:
        return self.category_filter.apply(self.results, self.selection)

    def begin(self, raw_query: str) -> int:
        """Record a new query and return its generation number."""
        self._generation += 1
        self.query = raw_query
        return self._generation

    def accept(self, generation: int, results: list[ResultEntry]) -> bool:
        """Store results unless a newer query superseded them.

        Returns:
            True when the results were kept.
        """
        if generation != self._generation or generation <= self._accepted:
            return False
        self._accepted = generation
        self.results = list(results)
        return True

    def set_query(self, raw_query: str) -> list[ResultEntry]:
        """Search for ``raw_query`` and return the displayed results."""
        generation = self.begin(raw_query)
        self.accept(generation, self.service.search(raw_query))
        return self.displayed

    def toggle(self, key: str) -> list[ResultEntry]:
        """Flip one category flag and return the displayed results.

        Raises:
            InvalidSelectionKey: If ``key`` is not a configured category.
        """
        self.selection = self.category_filter.taxonomy.toggle(self.selection, key)
        return self.displayed

    def activate(self, key: str) -> list[ResultEntry]:
        """Set one category flag active and return the displayed results.

        Raises:
            InvalidSelectionKey: If ``key`` is not a configured category.
        """
        self.selection = self.category_filter.taxonomy.activate(self.selection, key)
        return self.displayed

    def active_labels(self) -> tuple[str, ...]:
        return tuple(category.label for category in self.category_filter.taxonomy.active_categories(self.selection))
