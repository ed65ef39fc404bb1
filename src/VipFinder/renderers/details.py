"""Detail projection for a single record.

Pure mapping from a record to ordered ``(key, DisplayValue)`` rows; the
caller owns rendering.
"""

from __future__ import annotations

import math
import re
from typing import Any, Sequence

from VipFinder.core.models import BLANK, LINK, TEXT, DetailEntry, DisplayValue, Record, field_text

PRIORITY_FIELDS: tuple[str, ...] = (
    "PubMed_ID",
    "Title",
    "VIP_name",
    "VIP_family_name",
    "Database",
    "DOI",
    "Homepage",
    "Source_code",
    "Year",
)

_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


def classify_value(value: Any) -> DisplayValue:
    """Classify a raw field value as blank, link or plain text."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return DisplayValue(kind=BLANK)
    text = field_text(value)
    if isinstance(value, str) and _URL_RE.match(value):
        return DisplayValue(kind=LINK, text=text, href=text)
    return DisplayValue(kind=TEXT, text=text)


def ordered_keys(record: Record, priority: Sequence[str] = PRIORITY_FIELDS) -> list[str]:
    """Priority fields present on the record, then the rest alphabetically."""
    top = [key for key in priority if key in record]
    rest = sorted((key for key in record if key not in priority), key=lambda key: (key.casefold(), key))
    return top + rest


def project(record: Record, priority: Sequence[str] = PRIORITY_FIELDS) -> list[DetailEntry]:
    """Project a record into ordered detail rows.

    Every key of the record appears exactly once.

    Args:
        record: Record to project.
        priority: Fields shown first, in this order, when present.

    Returns:
        Ordered detail entries.
    """
    return [DetailEntry(key=key, value=classify_value(record[key])) for key in ordered_keys(record, priority)]


get_details = project
