"""In-memory record store, loaded once and never mutated."""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Sequence

import requests

from VipFinder.core.models import Record
from VipFinder.storage.fetch import DatasetClient
from VipFinder.utils.log import log


class LoadError(RuntimeError):
    """Raised when the dataset cannot be fetched or is not an array of objects."""


class RecordStore:
    """Immutable, ordered collection of catalog records.

    Records keep the order of the source document and are exposed as
    read-only mappings.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Sequence[Record]) -> None:
        self._records: tuple[Record, ...] = tuple(records)

    @classmethod
    def load(cls, raw_data: Any) -> RecordStore:
        """Build a store from decoded JSON.

        Args:
            raw_data: Decoded dataset document.

        Returns:
            A new RecordStore.

        Raises:
            LoadError: If ``raw_data`` is not a list of mappings.
        """
        if not isinstance(raw_data, list):
            raise LoadError(f"Dataset root must be an array, got {type(raw_data).__name__}")
        records: list[Record] = []
        for idx, item in enumerate(raw_data):
            if not isinstance(item, Mapping):
                raise LoadError(f"Dataset item {idx} must be an object, got {type(item).__name__}")
            records.append(MappingProxyType(dict(item)))
        return cls(records)

    def all(self) -> tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)


def load_record_store(source: str, *, timeout: float = 30.0) -> RecordStore:
    """Fetch, decode and load the dataset at ``source``.

    Args:
        source: Local path or ``http(s)://`` URL of the JSON document.
        timeout: HTTP timeout in seconds.

    Returns:
        Loaded RecordStore.

    Raises:
        LoadError: On any fetch, decode or shape failure.
    """
    try:
        with DatasetClient(timeout=timeout) as client:
            text = client.fetch_text(source)
    except (OSError, requests.RequestException) as exc:
        raise LoadError(f"Failed to fetch dataset from {source}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise LoadError(f"Dataset at {source} is not valid UTF-8: {exc}") from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LoadError(f"Dataset at {source} is not valid JSON: {exc}") from exc

    store = RecordStore.load(raw)
    log.info("Loaded %d rows from %s", len(store), source)
    return store
