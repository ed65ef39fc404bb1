"""Console text output renderers.

Renders result pages as cards and a record's details as key/value lines.
Provides ConsoleOutputWriter, which prints through the package logger.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from VipFinder.core.models import BLANK, DetailEntry, QueryResult
from VipFinder.renderers.base import OutputWriter
from VipFinder.renderers.mapper import map_matches_to_cards
from VipFinder.renderers.view_models import RecordCard
from VipFinder.utils.log import log

BLANK_LABEL = "(blank)"
NO_MATCHES = "No matches."
PROMPT = "No active filters. Type a query or choose a filter."


def describe_result(result: QueryResult) -> str:
    """Return the status line shown above a result page."""
    if result.mode == "exact":
        return "Exact PMID match: 1 row"
    if result.mode == "prompt":
        return PROMPT
    if result.mode == "browse":
        return f"Loaded {result.total_matches} rows. Page {result.page}/{result.total_pages}"
    if result.total_matches == 0:
        return NO_MATCHES
    return f"Matches: {result.total_matches}. Page {result.page}/{result.total_pages}"


def render_cards(cards: Iterable[RecordCard], *, start: int = 1) -> str:
    """Render result cards into a text block.

    Args:
        cards: Cards to render.
        start: Number of the first card.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for idx, card in enumerate(cards, start=start):
        lines.append(f"{idx}. {card.title}")
        pills = [f"PMID: {card.pmid}"]
        if card.vip_name:
            pills.append(card.vip_name)
        if card.database:
            pills.append(f"Database: {card.database}")
        lines.append("   " + " | ".join(pills))
        if card.score is not None:
            lines.append(f"   Score: {card.score:.3f}")
    return "\n".join(lines)


def render_text(result: QueryResult, page_size: int | None = None) -> str:
    """Render a result page with its status line."""
    first = 1
    if page_size:
        first = (result.page - 1) * page_size + 1
    body = render_cards(map_matches_to_cards(result.results), start=first)
    head = describe_result(result)
    return f"{head}\n{body}" if body else head


def render_details(entries: Sequence[DetailEntry]) -> str:
    """Render detail rows as aligned ``key: value`` lines."""
    if not entries:
        return ""
    width = max(len(entry.key) for entry in entries)
    lines = []
    for entry in entries:
        value = BLANK_LABEL if entry.value.kind == BLANK else entry.value.text
        lines.append(f"{entry.key.ljust(width)} : {value}")
    return "\n".join(lines)


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def __init__(self, page_size: int | None = None) -> None:
        self.page_size = page_size

    def write_query_result(self, result: QueryResult, label: str) -> None:
        log.info("query=%s", label)
        for line in render_text(result, self.page_size).splitlines():
            log.info(line)

    def write_details(self, entries: Sequence[DetailEntry]) -> None:
        log.info("--- Details ---")
        for line in render_details(entries).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
