"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Sequence

import click

from SiteSearch.cli.commands import SearchCommand
from SiteSearch.config import AppConfig
from SiteSearch.renderers import create_output_writer
from SiteSearch.services import create_search_service, create_session
from SiteSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_search(self, action: str, query: str, categories: Sequence[str] = ()) -> None:
        """Execute the search command.

        Args:
            action: The CLI command name (e.g., 'search').
            query: Raw query text.
            categories: Category keys to activate.

        Raises:
            click.Abort: When the search fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            service = create_search_service(self.config)
            session = create_session(self.config, service)
            output_writer = create_output_writer(self.config)

            command = SearchCommand(
                session=session,
                output_writer=output_writer,
                query=query,
                categories=tuple(categories),
            )
            command.execute()
            output_writer.finalize(action)

        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e
