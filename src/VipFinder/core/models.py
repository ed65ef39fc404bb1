from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Final, Mapping, Optional, Sequence

Record = Mapping[str, Any]
"""One catalog row. Keys are dataset-defined; values are str/number/bool/None."""

IDENTIFIER_FIELD: Final[str] = "PubMed_ID"
TITLE_FIELD: Final[str] = "Title"
VIP_NAME_FIELD: Final[str] = "VIP_name"
VIP_FAMILY_FIELD: Final[str] = "VIP_family_name"
DATABASE_FIELD: Final[str] = "Database"
YEAR_FIELD: Final[str] = "Year"


def field_text(value: Any) -> str:
    """Stringify a field value the way the catalog displays it.

    ``None`` becomes an empty string, booleans become ``true``/``false`` and
    integral floats lose their fractional part (``1.0`` -> ``"1"``).
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def normalize_identifier(value: Any) -> str:
    """Return the trimmed identifier text used as an external key."""
    return field_text(value).strip()


@dataclass(frozen=True, slots=True)
class RankedMatch:
    """A record in a result list.

    Attributes:
        record: The matched record.
        score: Fuzzy distance in ``[0, 1]`` (0 is a perfect match), or None
            for results that keep dataset order (browse, filter, exact).
    """

    record: Record
    score: Optional[float] = None


@dataclass(slots=True)
class PageState:
    """Current page (1-based) over a result list of ``total_items`` rows."""

    page_size: int
    page: int = 1
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        if self.total_items <= 0:
            return 0
        return math.ceil(self.total_items / self.page_size)

    def clamp(self) -> None:
        self.page = min(max(self.page, 1), max(self.total_pages, 1))

    def bounds(self) -> tuple[int, int]:
        start = (self.page - 1) * self.page_size
        return start, start + self.page_size


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Outcome of one query interaction, sliced to the current page.

    Attributes:
        results: Matches visible on the current page.
        total_matches: Size of the full (unpaginated) match list.
        page: Current 1-based page.
        total_pages: ``ceil(total_matches / page_size)``; 0 when empty.
        mode: How the list was produced: ``exact``, ``browse``, ``prompt``,
            ``fuzzy`` or ``filter``.
    """

    results: Sequence[RankedMatch]
    total_matches: int
    page: int
    total_pages: int
    mode: str

    @property
    def records(self) -> list[Record]:
        return [match.record for match in self.results]


BLANK: Final[str] = "blank"
LINK: Final[str] = "link"
TEXT: Final[str] = "text"


@dataclass(frozen=True, slots=True)
class DisplayValue:
    """Classified field value for rendering.

    ``kind`` is one of ``blank``, ``link`` or ``text``. For links ``href`` and
    ``text`` are both the raw URL; blanks carry ``text=None`` so a missing
    field never looks like an empty one.
    """

    kind: str
    text: Optional[str] = None
    href: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DetailEntry:
    """One ``(field name, classified value)`` row of a record's detail view."""

    key: str
    value: DisplayValue
