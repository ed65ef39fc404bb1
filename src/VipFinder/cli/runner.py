"""Command runner for coordinating CLI execution.

Configures logging, loads the dataset once, builds the query components and
converts failures into ``click.Abort`` at the CLI boundary.
"""

from __future__ import annotations

from typing import Callable, Protocol

import click

from VipFinder.config import AppConfig
from VipFinder.renderers import OutputWriter, create_output_writer
from VipFinder.services import QueryCoordinator, create_query_coordinator
from VipFinder.storage import LoadError, create_record_store
from VipFinder.utils.log import configure_logging, log


class Command(Protocol):
    def execute(self) -> None: ...


CommandBuilder = Callable[[QueryCoordinator, OutputWriter], Command]


class CommandRunner:
    """Orchestrates command execution with logging and error handling."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run(self, action: str, build: CommandBuilder) -> None:
        """Execute one command.

        Args:
            action: The CLI command name (e.g. 'search').
            build: Creates the command from the coordinator and writer.

        Raises:
            click.Abort: When the data is unavailable or the command fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            store = create_record_store(self.config)
        except LoadError as e:
            log.error("Data unavailable: %s", e)
            raise click.Abort from e

        try:
            coordinator = create_query_coordinator(self.config, store)
            output_writer = create_output_writer(self.config)
            command = build(coordinator, output_writer)
            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e
