"""Mapper from matched records to RecordCard display models."""

from __future__ import annotations

from typing import Sequence

from VipFinder.core.models import (
    DATABASE_FIELD,
    IDENTIFIER_FIELD,
    TITLE_FIELD,
    VIP_NAME_FIELD,
    RankedMatch,
    field_text,
    normalize_identifier,
)
from VipFinder.renderers.view_models import RecordCard

NO_TITLE = "(no title)"


def map_match_to_card(match: RankedMatch) -> RecordCard:
    """Build the result card for one match.

    Empty name and database values are shown as absent rather than blank pills.
    """
    record = match.record
    title = record.get(TITLE_FIELD)
    return RecordCard(
        pmid=normalize_identifier(record.get(IDENTIFIER_FIELD)),
        title=NO_TITLE if title is None else field_text(title),
        vip_name=field_text(record.get(VIP_NAME_FIELD)) or None,
        database=field_text(record.get(DATABASE_FIELD)) or None,
        score=match.score,
    )


def map_matches_to_cards(matches: Sequence[RankedMatch]) -> list[RecordCard]:
    return [map_match_to_card(m) for m in matches]
