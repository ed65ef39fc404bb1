"""Base classes for output writers.

Separates command control flow from how results are shown or saved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from VipFinder.core.models import DetailEntry, QueryResult


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query_result(self, result: QueryResult, label: str) -> None:
        """Write one page of query results.

        Args:
            result: Query result for the current page.
            label: Human-readable description of the query.
        """

    @abstractmethod
    def write_details(self, entries: Sequence[DetailEntry]) -> None:
        """Write the detail projection of a selected record."""

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Flush accumulated output.

        Args:
            action: The CLI command name (e.g. 'search').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_query_result(self, result: QueryResult, label: str) -> None:
        for writer in self.writers:
            writer.write_query_result(result, label)

    def write_details(self, entries: Sequence[DetailEntry]) -> None:
        for writer in self.writers:
            writer.write_details(entries)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
