"""Query coordination: exact-ID shortcut, browse, fuzzy search, filters, paging."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from VipFinder.core.models import (
    IDENTIFIER_FIELD,
    PageState,
    QueryResult,
    RankedMatch,
    Record,
    normalize_identifier,
)
from VipFinder.core.query import (
    EMPTY_QUERY_BROWSE,
    EMPTY_QUERY_POLICIES,
    EMPTY_QUERY_PROMPT,
    ConstraintSet,
    QueryError,
)
from VipFinder.services.filters import FilterEngine
from VipFinder.services.fuzzy import FuzzyIndex
from VipFinder.storage.records import RecordStore
from VipFinder.utils.log import log

DEFAULT_PAGE_SIZE = 50
DEFAULT_MAX_FUZZY_RESULTS = 50

_NO_CONSTRAINTS = ConstraintSet()


@dataclass(slots=True)
class QuerySession:
    """Per-caller query state.

    Holds the full match list of the last query and the page being viewed, so
    paging never recomputes matches. Sessions are independent; one
    coordinator can serve many.
    """

    page_state: PageState
    matches: list[RankedMatch] = field(default_factory=list)
    mode: str = EMPTY_QUERY_BROWSE
    query_key: Optional[tuple] = None


@dataclass(slots=True)
class QueryCoordinator:
    """Turn a free-text query and/or constraints into a paginated result.

    Attributes:
        store: Loaded record store.
        index: Fuzzy index built from ``store``.
        engine: Structured filter engine.
        page_size: Rows per page.
        max_fuzzy_results: Cap on fuzzy-only results.
        empty_query: ``browse`` shows the whole store when nothing is asked;
            ``prompt`` returns no rows and lets the caller ask for input.
    """

    store: RecordStore
    index: FuzzyIndex
    engine: FilterEngine = field(default_factory=FilterEngine)
    page_size: int = DEFAULT_PAGE_SIZE
    max_fuzzy_results: int = DEFAULT_MAX_FUZZY_RESULTS
    empty_query: str = EMPTY_QUERY_BROWSE

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise QueryError("page_size must be positive")
        if self.max_fuzzy_results <= 0:
            raise QueryError("max_fuzzy_results must be positive")
        if self.empty_query not in EMPTY_QUERY_POLICIES:
            raise QueryError(f"empty_query must be one of {sorted(EMPTY_QUERY_POLICIES)}")

    def new_session(self) -> QuerySession:
        return QuerySession(page_state=PageState(page_size=self.page_size))

    def run_query(
        self,
        session: QuerySession,
        free_text: str | None = None,
        constraints: ConstraintSet | None = None,
    ) -> QueryResult:
        """Evaluate one interaction and store its matches in ``session``.

        Args:
            session: Caller-owned session to update.
            free_text: Search box text; may be empty.
            constraints: Structured filters; may be None.

        Returns:
            The current page of the new match list.
        """
        text = (free_text or "").strip()
        constraints = constraints or _NO_CONSTRAINTS
        key = (text, constraints.key())

        exact = self.find_exact(text) if text else None
        if exact is not None:
            mode, matches = "exact", [RankedMatch(record=exact)]
        elif not text and constraints.is_empty:
            mode, matches = self._empty_query_matches()
        elif constraints.is_empty:
            mode = "fuzzy"
            matches = self.index.search(text)[: self.max_fuzzy_results]
        else:
            mode, matches = "filter", self._filter_matches(text, constraints)

        if mode == "exact" or key != session.query_key:
            session.page_state.page = 1
        session.query_key = key
        session.mode = mode
        session.matches = matches
        session.page_state.total_items = len(matches)
        session.page_state.clamp()

        log.debug("Query mode=%s text=%r total=%d", mode, text, len(matches))
        return self.current_page(session)

    def find_exact(self, text: str) -> Record | None:
        """Return the first record whose normalized identifier equals ``text``."""
        wanted = text.strip()
        if not wanted:
            return None
        for record in self.store:
            if normalize_identifier(record.get(IDENTIFIER_FIELD)) == wanted:
                return record
        return None

    def current_page(self, session: QuerySession) -> QueryResult:
        state = session.page_state
        start, stop = state.bounds()
        return QueryResult(
            results=tuple(session.matches[start:stop]),
            total_matches=len(session.matches),
            page=state.page,
            total_pages=state.total_pages,
            mode=session.mode,
        )

    def next_page(self, session: QuerySession) -> QueryResult:
        """Advance one page; no-op on the last page."""
        state = session.page_state
        if state.page < state.total_pages:
            state.page += 1
        return self.current_page(session)

    def previous_page(self, session: QuerySession) -> QueryResult:
        """Go back one page; no-op on the first page."""
        state = session.page_state
        if state.page > 1:
            state.page -= 1
        return self.current_page(session)

    def _empty_query_matches(self) -> tuple[str, list[RankedMatch]]:
        if self.empty_query == EMPTY_QUERY_PROMPT:
            return EMPTY_QUERY_PROMPT, []
        return EMPTY_QUERY_BROWSE, [RankedMatch(record=record) for record in self.store]

    def _filter_matches(self, text: str, constraints: ConstraintSet) -> list[RankedMatch]:
        subset = self.engine.evaluate(self.store.all(), constraints)
        if text:
            # The index holds the store's own record objects.
            accepted = {id(match.record) for match in self.index.search(text)}
            subset = [record for record in subset if id(record) in accepted]
        return [RankedMatch(record=record) for record in subset]
