"""JSON output renderers.

Renders query results and record details into JSON-serializable objects and
provides JsonFileWriter, which saves one document per command run.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

from VipFinder.core.models import DetailEntry, QueryResult
from VipFinder.renderers.base import OutputWriter
from VipFinder.utils.log import log


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def render_json(result: QueryResult) -> dict[str, Any]:
    """Render a result page into a plain dict.

    Records are copied field by field, in their original key order.
    """
    return {
        "mode": result.mode,
        "total_matches": result.total_matches,
        "page": result.page,
        "total_pages": result.total_pages,
        "results": [
            {
                "score": match.score,
                "record": {key: _jsonable(value) for key, value in match.record.items()},
            }
            for match in result.results
        ],
    }


def render_details_json(entries: Sequence[DetailEntry]) -> list[dict[str, Any]]:
    """Render detail rows; blanks keep ``value: null`` with ``kind: blank``."""
    out: list[dict[str, Any]] = []
    for entry in entries:
        row: dict[str, Any] = {"key": entry.key, "kind": entry.value.kind, "value": entry.value.text}
        if entry.value.href:
            row["href"] = entry.value.href
        out.append(row)
    return out


class JsonFileWriter(OutputWriter):
    """Accumulate results and write them to a JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "json"
        self.payload: dict[str, list] = {"queries": [], "details": []}

    def write_query_result(self, result: QueryResult, label: str) -> None:
        self.payload["queries"].append({"query": label, **render_json(result)})

    def write_details(self, entries: Sequence[DetailEntry]) -> None:
        self.payload["details"].append(render_details_json(entries))

    def finalize(self, action: str) -> Path | None:
        """Write accumulated output to ``<base_dir>/json/<action>_<ts>.json``."""
        if not self.payload["queries"] and not self.payload["details"]:
            return None
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(json.dumps(self.payload, ensure_ascii=False, indent=2), encoding="utf-8")
        log.info("JSON saved to %s", output_path)
        return output_path
