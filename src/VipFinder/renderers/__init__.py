"""Output renderers for command results.

Exports the OutputWriter protocol, the detail projection and a factory that
instantiates writers from configuration.
"""

from __future__ import annotations

from VipFinder.config import AppConfig
from VipFinder.renderers.base import MultiOutputWriter, OutputWriter
from VipFinder.renderers.console import ConsoleOutputWriter, render_details, render_text
from VipFinder.renderers.details import classify_value, get_details, project
from VipFinder.renderers.json import JsonFileWriter, render_details_json, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create the output writer for the configured formats.

    Raises:
        ValueError: If no known format is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter(page_size=config.search.page_size))
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
    "classify_value",
    "get_details",
    "project",
    "render_details",
    "render_details_json",
    "render_json",
    "render_text",
    "create_output_writer",
]
