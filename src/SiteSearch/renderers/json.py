"""JSON output renderers.

Renders a list of `ResultEntry` into JSON-serializable objects.
Provides JsonFileWriter implementation for command output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Sequence

from SiteSearch.core.models import ResultEntry
from SiteSearch.renderers.base import OutputWriter
from SiteSearch.utils.log import log


def render_json(results: Iterable[ResultEntry]) -> list[dict[str, Any]]:
    """Render results into JSON-serializable Python objects.

    Args:
        results: Iterable of result entries.

    Returns:
        One dict per entry with ``slug``, ``score`` and the stored metadata.
    """
    return [{**entry.as_dict(), "score": entry.score} for entry in results]


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []

    def write_results(
        self,
        results: Sequence[ResultEntry],
        query: str,
        active_labels: Sequence[str],
    ) -> None:
        """Accumulate one query result for later writing."""
        self.all_results.append(
            {
                "query": query,
                "categories": list(active_labels),
                "results": render_json(results),
            }
        )

    def finalize(self, action: str) -> None:
        """Write accumulated results to JSON file.

        Args:
            action: The CLI command name (used in filename).
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
