"""View models for output rendering.

Display-oriented structures kept apart from raw records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class RecordCard:
    """Summary card of one record in a result list.

    Attributes:
        pmid: Normalized PubMed identifier (may be empty).
        title: Record title, or ``(no title)`` when missing.
        vip_name: Tool name if present.
        database: Database flag/value if present.
        score: Fuzzy distance for ranked results, else None.
    """

    pmid: str
    title: str
    vip_name: Optional[str]
    database: Optional[str]
    score: Optional[float] = None
