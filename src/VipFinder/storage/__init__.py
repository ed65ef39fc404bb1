"""Storage layer for VipFinder.

Fetches the catalog document and holds its records in memory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from VipFinder.storage.fetch import DatasetClient
from VipFinder.storage.records import LoadError, RecordStore, load_record_store

if TYPE_CHECKING:
    from VipFinder.config import AppConfig


def create_record_store(config: AppConfig) -> RecordStore:
    """Load the record store from the configured data source.

    Args:
        config: Application configuration containing data settings.

    Returns:
        Loaded RecordStore.

    Raises:
        LoadError: If the dataset is unavailable or malformed.
    """
    return load_record_store(config.data.source, timeout=config.data.timeout)


__all__ = [
    "DatasetClient",
    "LoadError",
    "RecordStore",
    "load_record_store",
    "create_record_store",
]
