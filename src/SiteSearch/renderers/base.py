"""Base classes for output writers.

Provides abstraction for writing search results to console or files.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from SiteSearch.core.models import ResultEntry


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_results(
        self,
        results: Sequence[ResultEntry],
        query: str,
        active_labels: Sequence[str],
    ) -> None:
        """Write the displayed results of one query.

        Args:
            results: Displayed (category-filtered) results.
            query: Raw query text that produced the results.
            active_labels: Labels of the active categories, empty when unfiltered.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_results(
        self,
        results: Sequence[ResultEntry],
        query: str,
        active_labels: Sequence[str],
    ) -> None:
        """Send results to all writers."""
        for writer in self.writers:
            writer.write_results(results, query, active_labels)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
