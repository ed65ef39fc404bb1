"""Fuzzy index over the searchable catalog fields.

Scoring is delegated to ``rapidfuzz``. Each field is compared with a partial
alignment, so a hit anywhere in a long field counts as much as a hit at its
start; the best field wins. Scores are distances in ``[0, 1]`` where 0 is a
perfect match, and only matches at or under ``threshold`` are returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rapidfuzz import fuzz, utils

from VipFinder.core.models import RankedMatch, Record, field_text
from VipFinder.core.query import QueryError
from VipFinder.utils.log import log

DEFAULT_THRESHOLD = 0.35


def _similarity(query: str, text: str, cutoff: float) -> float:
    """Return rapidfuzz similarity (0-100) of a processed query and field."""
    if not text:
        return 0.0
    # partial_ratio aligns the shorter string inside the longer one; a field
    # shorter than the query must match as a whole.
    if len(text) < len(query):
        return fuzz.ratio(query, text, score_cutoff=cutoff)
    return fuzz.partial_ratio(query, text, score_cutoff=cutoff)


@dataclass(frozen=True, slots=True)
class FuzzyIndex:
    """Read-only fuzzy index built once from a record sequence.

    Attributes:
        records: Indexed records in store order.
        fields: Searchable field names.
        threshold: Maximum accepted distance; lower is stricter.
    """

    records: tuple[Record, ...]
    fields: tuple[str, ...]
    threshold: float
    _documents: tuple[tuple[str, ...], ...]

    @classmethod
    def build(
        cls,
        records: Sequence[Record],
        fields: Sequence[str],
        *,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> FuzzyIndex:
        """Pre-process every searchable field of every record.

        Args:
            records: Records in store order.
            fields: Field names eligible for fuzzy matching.
            threshold: Acceptance threshold in ``(0, 1]``.

        Returns:
            A new FuzzyIndex.
        """
        documents = tuple(
            tuple(utils.default_process(field_text(record.get(name))) for name in fields)
            for record in records
        )
        log.debug("Built fuzzy index: records=%d fields=%d threshold=%.2f", len(documents), len(fields), threshold)
        return cls(
            records=tuple(records),
            fields=tuple(fields),
            threshold=threshold,
            _documents=documents,
        )

    def search(self, query: str) -> list[RankedMatch]:
        """Rank records against ``query``, best first.

        Ties keep store order.

        Args:
            query: Free-text query.

        Returns:
            Accepted matches ordered by ascending distance.

        Raises:
            QueryError: If the query is empty or blank.
        """
        if not query or not query.strip():
            raise QueryError("Fuzzy search needs a non-empty query")

        processed = utils.default_process(query)
        if not processed:
            return []

        cutoff = (1.0 - self.threshold) * 100.0
        scored: list[tuple[float, int]] = []
        for idx, document in enumerate(self._documents):
            best = max((_similarity(processed, text, cutoff) for text in document), default=0.0)
            if best and best >= cutoff:
                scored.append((1.0 - best / 100.0, idx))

        scored.sort()
        return [RankedMatch(record=self.records[idx], score=round(score, 4)) for score, idx in scored]

