"""Search domain configuration: fuzzy threshold, paging and field sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from VipFinder.config.common import (
    expect_field_names,
    expect_float,
    expect_int,
    expect_str,
    get_optional_value,
    get_section,
)
from VipFinder.core.query import EMPTY_QUERY_POLICIES

DEFAULT_SEARCHABLE_FIELDS = [
    "PubMed_ID",
    "Title",
    "VIP_name",
    "VIP_family_name",
    "Database",
    "DOI",
    "Homepage",
    "Source_code",
    "Website_accessible",
    "Primarily_for_VIP",
    "Gene-specific",
]

DEFAULT_FILTERABLE_FIELDS = [
    "Database",
    "Website_accessible",
    "Primarily_for_VIP",
    "Gene-specific",
]


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Validated query behavior.

    Attributes:
        threshold: Fuzzy acceptance threshold in ``(0, 1]``; lower is stricter.
        max_fuzzy_results: Cap on fuzzy-only results.
        page_size: Rows per page.
        empty_query: ``browse`` or ``prompt``.
        searchable_fields: Fields used by fuzzy search.
        filterable_fields: Fields allowed in categorical filters.
    """

    threshold: float
    max_fuzzy_results: int
    page_size: int
    empty_query: str
    searchable_fields: tuple[str, ...]
    filterable_fields: tuple[str, ...]


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load the ``search`` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "search", required=False)
    return SearchConfig(
        threshold=expect_float(get_optional_value(section, "threshold", 0.35), "search.threshold"),
        max_fuzzy_results=expect_int(
            get_optional_value(section, "max_fuzzy_results", 50),
            "search.max_fuzzy_results",
        ),
        page_size=expect_int(get_optional_value(section, "page_size", 50), "search.page_size"),
        empty_query=expect_str(
            get_optional_value(section, "empty_query", "browse"),
            "search.empty_query",
        ).strip().lower(),
        searchable_fields=expect_field_names(
            get_optional_value(section, "searchable_fields", DEFAULT_SEARCHABLE_FIELDS),
            "search.searchable_fields",
        ),
        filterable_fields=expect_field_names(
            get_optional_value(section, "filterable_fields", DEFAULT_FILTERABLE_FIELDS),
            "search.filterable_fields",
        ),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if not 0 < config.threshold <= 1:
        raise ValueError("search.threshold must be in (0, 1]")
    if config.max_fuzzy_results <= 0:
        raise ValueError("search.max_fuzzy_results must be positive")
    if config.page_size <= 0:
        raise ValueError("search.page_size must be positive")
    if config.empty_query not in EMPTY_QUERY_POLICIES:
        raise ValueError(f"search.empty_query must be one of {sorted(EMPTY_QUERY_POLICIES)}")
    if not config.searchable_fields:
        raise ValueError("search.searchable_fields must include at least one field")
    if not config.filterable_fields:
        raise ValueError("search.filterable_fields must include at least one field")
