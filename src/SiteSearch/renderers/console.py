"""Console text output renderers.

Renders a list of `ResultEntry` into human-friendly text.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from SiteSearch.core.models import ResultEntry
from SiteSearch.renderers.base import OutputWriter
from SiteSearch.utils.log import log


def render_text(results: Iterable[ResultEntry]) -> str:
    """Render results into a human-readable text block.

    Args:
        results: Iterable of result entries.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for idx, entry in enumerate(results, start=1):
        lines.append(f"{idx}. {entry.title}")
        lines.append(f"   Ref: {entry.reference}")
        if entry.score is not None:
            lines.append(f"   Score: {entry.score:.3f}")
        if entry.excerpt:
            lines.append(f"   {entry.excerpt}")
        lines.append("")
    if not lines:
        return "No results.\n"
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_results(
        self,
        results: Sequence[ResultEntry],
        query: str,
        active_labels: Sequence[str],
    ) -> None:
        log.info("query=%r categories=%s count=%d", query, ", ".join(active_labels) or "all", len(results))
        for line in render_text(results).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
