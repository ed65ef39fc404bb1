"""Command implementations for the VipFinder CLI.

Each command receives ready-built components and only orchestrates them;
option parsing lives in ``ui`` and lifecycle handling in ``runner``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import click

from VipFinder.core.models import QueryResult
from VipFinder.core.query import ConstraintSet
from VipFinder.renderers import OutputWriter, get_details
from VipFinder.renderers.console import NO_MATCHES
from VipFinder.services.query import QueryCoordinator
from VipFinder.utils.log import log


def describe_query(free_text: str, constraints: ConstraintSet) -> str:
    """Build a one-line label for a query."""
    parts: list[str] = []
    if free_text.strip():
        parts.append(repr(free_text.strip()))
    for name, term in constraints.text.items():
        parts.append(f"{name}~{term}")
    if constraints.years.is_bounded:
        start = "" if constraints.years.start is None else constraints.years.start
        end = "" if constraints.years.end is None else constraints.years.end
        parts.append(f"Year=[{start},{end}]")
    for name, value in constraints.categories.items():
        parts.append(f"{name}={value}")
    return " ".join(parts) or "(all)"


@dataclass(slots=True)
class SearchCommand:
    """Run one query and write the requested page.

    The first result's details are written too, so a single hit needs no
    follow-up ``show``.
    """

    coordinator: QueryCoordinator
    output_writer: OutputWriter
    free_text: str = ""
    constraints: ConstraintSet = field(default_factory=ConstraintSet)
    page: int = 1
    show_details: bool = True

    def execute(self) -> None:
        session = self.coordinator.new_session()
        result = self.coordinator.run_query(session, self.free_text, self.constraints)
        while result.page < min(self.page, result.total_pages):
            result = self.coordinator.next_page(session)

        self.output_writer.write_query_result(result, describe_query(self.free_text, self.constraints))
        if self.show_details and result.results:
            self.output_writer.write_details(get_details(result.results[0].record))


@dataclass(slots=True)
class ShowCommand:
    """Write the full details of the record with a given PubMed ID."""

    coordinator: QueryCoordinator
    output_writer: OutputWriter
    pmid: str

    def execute(self) -> None:
        record = self.coordinator.find_exact(self.pmid)
        if record is None:
            log.info("No record with PubMed_ID %s", self.pmid.strip())
            log.info(NO_MATCHES)
            return
        self.output_writer.write_details(get_details(record))


BROWSE_HELP = "Type to search. n/p: next/previous page, :d N: details of row N, :q: quit."

# Searches that show the top hit's details straight away.
_DETAIL_MODES = frozenset({"exact", "fuzzy"})


def _read_line() -> str:
    return click.prompt("search", default="", show_default=False, prompt_suffix="> ")


@dataclass(slots=True)
class BrowseCommand:
    """Interactive loop over one session, like the live search box.

    Attributes:
        prompt: Reads one line of input; injectable for tests.
    """

    coordinator: QueryCoordinator
    output_writer: OutputWriter
    prompt: Callable[[], str] = _read_line

    def execute(self) -> None:
        session = self.coordinator.new_session()
        result = self.coordinator.run_query(session, "")
        self.output_writer.write_query_result(result, "(all)")
        log.info(BROWSE_HELP)

        while True:
            try:
                line = self.prompt().strip()
            except (EOFError, click.Abort):
                return
            if line == ":q":
                return
            if line == "n":
                result = self.coordinator.next_page(session)
            elif line == "p":
                result = self.coordinator.previous_page(session)
            elif line.startswith(":d"):
                self._show_row(result, line[2:].strip())
                continue
            else:
                result = self.coordinator.run_query(session, line)
                self.output_writer.write_query_result(result, line or "(all)")
                if result.mode in _DETAIL_MODES and result.results:
                    self.output_writer.write_details(get_details(result.results[0].record))
                continue
            self.output_writer.write_query_result(result, line or "(all)")

    def _show_row(self, result: QueryResult, number: str) -> None:
        """Show details for a row number as printed on the current page."""
        if not number.isdigit():
            log.warning("Usage: :d N")
            return
        position = int(number) - 1 - (result.page - 1) * self.coordinator.page_size
        if not 0 <= position < len(result.results):
            log.warning("No row %s on this page", number)
            return
        self.output_writer.write_details(get_details(result.results[position].record))
