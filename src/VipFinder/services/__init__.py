"""Query service layer for VipFinder.

Provides the fuzzy index, the filter engine and the query coordinator, plus
a factory wiring them from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from VipFinder.services.filters import FilterEngine
from VipFinder.services.fuzzy import FuzzyIndex
from VipFinder.services.query import QueryCoordinator, QuerySession
from VipFinder.utils.log import log

if TYPE_CHECKING:
    from VipFinder.config import AppConfig
    from VipFinder.storage.records import RecordStore


def create_query_coordinator(config: AppConfig, store: RecordStore) -> QueryCoordinator:
    """Build the fuzzy index once and wire a coordinator around it.

    Args:
        config: Application configuration containing search settings.
        store: Loaded record store.

    Returns:
        Configured QueryCoordinator.
    """
    search = config.search
    index = FuzzyIndex.build(store.all(), search.searchable_fields, threshold=search.threshold)
    log.debug("Empty query policy: %s", search.empty_query)
    return QueryCoordinator(
        store=store,
        index=index,
        engine=FilterEngine(),
        page_size=search.page_size,
        max_fuzzy_results=search.max_fuzzy_results,
        empty_query=search.empty_query,
    )


__all__ = [
    "FilterEngine",
    "FuzzyIndex",
    "QueryCoordinator",
    "QuerySession",
    "create_query_coordinator",
]
