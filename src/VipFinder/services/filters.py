"""Structured filter evaluation over the record store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from VipFinder.core.models import YEAR_FIELD, Record, field_text
from VipFinder.core.query import ConstraintSet, parse_int_prefix


def record_year(record: Record, field: str = YEAR_FIELD) -> int:
    """Return the record's year for range checks.

    A missing or unparsable year counts as 0, so such records only pass
    ranges without a positive lower bound.
    """
    year = parse_int_prefix(record.get(field))
    return 0 if year is None else year


@dataclass(frozen=True, slots=True)
class FilterEngine:
    """Evaluate AND-combined constraints as a pure subset operation."""

    year_field: str = YEAR_FIELD

    def matches(self, record: Record, constraints: ConstraintSet) -> bool:
        """Return True when ``record`` satisfies every constraint."""
        for name, term in constraints.text.items():
            if term.casefold() not in field_text(record.get(name)).casefold():
                return False

        if constraints.years.is_bounded and not constraints.years.contains(record_year(record, self.year_field)):
            return False

        for name, value in constraints.categories.items():
            if field_text(record.get(name)) != value:
                return False

        return True

    def evaluate(self, records: Sequence[Record], constraints: ConstraintSet) -> list[Record]:
        """Return every record matching ``constraints`` in input order.

        Args:
            records: Records in store order.
            constraints: Constraint set to apply.

        Returns:
            Matching records; no cap is applied.
        """
        return [record for record in records if self.matches(record, constraints)]
