"""Command implementations for SiteSearch CLI.

Encapsulates business logic for commands, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from SiteSearch.renderers import OutputWriter
from SiteSearch.services.session import SearchSession
from SiteSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one query through a session and hand the displayed results to output.

    Categories are switched on before results are written; repeating a key
    keeps it on.
    """

    session: SearchSession
    output_writer: OutputWriter
    query: str
    categories: Sequence[str] = ()

    def execute(self) -> None:
        for key in self.categories:
            self.session.activate(key)

        self.session.set_query(self.query)
        log.info("Fetched %d results", len(self.session.results))

        displayed = self.session.displayed
        if len(displayed) != len(self.session.results):
            log.info("Category filter kept %d of %d results", len(displayed), len(self.session.results))
        self.output_writer.write_results(displayed, self.query, self.session.active_labels())
