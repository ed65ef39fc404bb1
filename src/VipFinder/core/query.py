from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from VipFinder.core.models import (
    IDENTIFIER_FIELD,
    TITLE_FIELD,
    VIP_FAMILY_FIELD,
    VIP_NAME_FIELD,
    field_text,
)

TEXT_FILTER_FIELDS: tuple[str, ...] = (
    TITLE_FIELD,
    VIP_NAME_FIELD,
    VIP_FAMILY_FIELD,
    IDENTIFIER_FIELD,
)

EMPTY_QUERY_BROWSE = "browse"
EMPTY_QUERY_PROMPT = "prompt"
EMPTY_QUERY_POLICIES = frozenset({EMPTY_QUERY_BROWSE, EMPTY_QUERY_PROMPT})

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_WHOLE_INT_RE = re.compile(r"^\s*([+-]?\d+)\s*$")


class QueryError(ValueError):
    """Raised when a query or constraint is built incorrectly by the caller."""


def parse_int_prefix(value: Any) -> Optional[int]:
    """Parse the leading integer of a value's text (``"2020 (v2)"`` -> 2020).

    Returns:
        The integer, or None when the text does not start with digits.
    """
    match = _LEADING_INT_RE.match(field_text(value))
    if match is None:
        return None
    return int(match.group(1))


def parse_year_bound(value: Any) -> Optional[int]:
    """Turn user input for a year bound into an int, or None for unbounded.

    Only a whole integer counts; anything else (``"2019abc"``, ``"soon"``)
    is treated as "no bound" rather than an error.
    """
    match = _WHOLE_INT_RE.match(field_text(value))
    if match is None:
        return None
    return int(match.group(1))


@dataclass(frozen=True, slots=True)
class YearRange:
    """Inclusive year range; a None end is unbounded."""

    start: Optional[int] = None
    end: Optional[int] = None

    @property
    def is_bounded(self) -> bool:
        return self.start is not None or self.end is not None

    def contains(self, year: int) -> bool:
        if self.start is not None and year < self.start:
            return False
        if self.end is not None and year > self.end:
            return False
        return True


@dataclass(frozen=True, slots=True)
class ConstraintSet:
    """Structured constraints applied with AND semantics.

    Attributes:
        text: Field name -> substring (case-insensitive) for the text fields
            Title, VIP_name, VIP_family_name and PubMed_ID.
        years: Inclusive year range over the ``Year`` field.
        categories: Field name -> exact value for categorical fields.
    """

    text: Mapping[str, str] = field(default_factory=dict)
    years: YearRange = YearRange()
    categories: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.text and not self.years.is_bounded and not self.categories

    def key(self) -> tuple:
        """Hashable identity used to detect that the constraints changed."""
        return (
            tuple(sorted(self.text.items())),
            (self.years.start, self.years.end),
            tuple(sorted(self.categories.items())),
        )


def build_constraints(
    *,
    text: Mapping[str, Any] | None = None,
    year_min: Any = None,
    year_max: Any = None,
    categories: Mapping[str, Any] | None = None,
    filterable_fields: Iterable[str] = (),
) -> ConstraintSet:
    """Build a ConstraintSet from raw form-like input.

    Blank values mean "filter not selected" and are dropped, so no constraint
    ever tests for equality with an empty string.

    Args:
        text: Text field -> substring.
        year_min: Lower year bound input (malformed -> unbounded).
        year_max: Upper year bound input (malformed -> unbounded).
        categories: Categorical field -> required value.
        filterable_fields: Fields allowed in ``categories``.

    Returns:
        Normalized constraint set.

    Raises:
        QueryError: If a text field or categorical field is not supported.
    """
    text_terms: dict[str, str] = {}
    for name, raw in (text or {}).items():
        if name not in TEXT_FILTER_FIELDS:
            raise QueryError(f"Unsupported text filter field: {name}")
        term = field_text(raw).strip()
        if term:
            text_terms[name] = term

    allowed = set(filterable_fields)
    category_terms: dict[str, str] = {}
    for name, raw in (categories or {}).items():
        if name not in allowed:
            raise QueryError(f"Field is not filterable: {name}")
        value = field_text(raw).strip()
        if value:
            category_terms[name] = value

    return ConstraintSet(
        text=text_terms,
        years=YearRange(start=parse_year_bound(year_min), end=parse_year_bound(year_max)),
        categories=category_terms,
    )


def parse_filter_option(option: str) -> tuple[str, str]:
    """Split a ``FIELD=VALUE`` command-line filter.

    Raises:
        QueryError: If the option has no ``=`` or an empty field name.
    """
    name, sep, value = option.partition("=")
    name = name.strip()
    if not sep or not name:
        raise QueryError(f"Filter must look like FIELD=VALUE: {option!r}")
    return name, value.strip()
