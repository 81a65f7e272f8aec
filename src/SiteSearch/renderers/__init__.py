"""Output renderers for command results.

Provides abstraction and implementations for writing search results to
console or JSON files, and a factory function to instantiate writers based
on configuration.
"""

from __future__ import annotations

from SiteSearch.config import AppConfig
from SiteSearch.renderers.base import MultiOutputWriter, OutputWriter
from SiteSearch.renderers.console import ConsoleOutputWriter, render_text
from SiteSearch.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Appropriate OutputWriter instance for configured formats.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
