"""Tests for query coordination and pagination."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from VipFinder.core.models import PageState
from VipFinder.core.query import ConstraintSet, QueryError, YearRange
from VipFinder.services.fuzzy import FuzzyIndex
from VipFinder.services.query import QueryCoordinator
from VipFinder.storage.records import RecordStore

FIELDS = ("PubMed_ID", "Title", "VIP_name", "Database")


def _coordinator(rows: list[dict], **kwargs) -> QueryCoordinator:
    store = RecordStore.load(rows)
    return QueryCoordinator(store=store, index=FuzzyIndex.build(store.all(), FIELDS), **kwargs)


def _numbered(count: int) -> list[dict]:
    return [{"PubMed_ID": str(1000 + i), "Title": f"Variant effect predictor {i}", "Database": "1"} for i in range(count)]


class TestQueryModes(unittest.TestCase):
    def setUp(self) -> None:
        self.coordinator = _coordinator(
            [
                {"PubMed_ID": "100", "Title": "SIFT predicts amino acid substitutions", "VIP_name": "SIFT", "Database": "1"},
                {"PubMed_ID": 200, "Title": "PolyPhen-2 server", "VIP_name": "PolyPhen-2", "Database": "0"},
                {"PubMed_ID": " 300 ", "Title": "Combined annotation dependent depletion", "VIP_name": "CADD", "Database": "1"},
            ]
        )
        self.session = self.coordinator.new_session()

    def _ids(self, result) -> list[str]:
        return [str(r["PubMed_ID"]).strip() for r in result.records]

    def test_exact_identifier_returns_single_record(self) -> None:
        result = self.coordinator.run_query(self.session, "200")

        self.assertEqual(result.mode, "exact")
        self.assertEqual(self._ids(result), ["200"])
        self.assertEqual(result.total_matches, 1)
        self.assertEqual((result.page, result.total_pages), (1, 1))

    def test_exact_identifier_ignores_other_constraints(self) -> None:
        constraints = ConstraintSet(categories={"Database": "1"}, years=YearRange(start=2100))
        result = self.coordinator.run_query(self.session, " 200 ", constraints)
        self.assertEqual(result.mode, "exact")
        self.assertEqual(self._ids(result), ["200"])

    def test_exact_identifier_is_trimmed_on_both_sides(self) -> None:
        result = self.coordinator.run_query(self.session, "300")
        self.assertEqual(result.mode, "exact")
        self.assertEqual(self._ids(result), ["300"])

    def test_partial_identifier_is_not_an_exact_match(self) -> None:
        result = self.coordinator.run_query(self.session, "20")
        self.assertNotEqual(result.mode, "exact")

    def test_empty_query_browses_whole_store(self) -> None:
        result = self.coordinator.run_query(self.session, "   ")

        self.assertEqual(result.mode, "browse")
        self.assertEqual(self._ids(result), ["100", "200", "300"])
        self.assertEqual(result.total_matches, 3)
        self.assertTrue(all(match.score is None for match in result.results))

    def test_prompt_policy_returns_no_rows(self) -> None:
        coordinator = _coordinator(_numbered(3), empty_query="prompt")
        result = coordinator.run_query(coordinator.new_session(), "")

        self.assertEqual(result.mode, "prompt")
        self.assertEqual(result.results, ())
        self.assertEqual((result.total_matches, result.total_pages), (0, 0))

    def test_free_text_uses_fuzzy_ranking(self) -> None:
        result = self.coordinator.run_query(self.session, "polyphen")
        self.assertEqual(result.mode, "fuzzy")
        self.assertEqual(self._ids(result), ["200"])
        self.assertIsNotNone(result.results[0].score)

    def test_free_text_without_match_is_empty(self) -> None:
        result = self.coordinator.run_query(self.session, "cancer")

        self.assertEqual(result.results, ())
        self.assertEqual(result.total_matches, 0)
        self.assertEqual(result.total_pages, 0)
        self.assertEqual(result.page, 1)

    def test_structured_constraints_use_filter_engine(self) -> None:
        result = self.coordinator.run_query(self.session, None, ConstraintSet(categories={"Database": "1"}))
        self.assertEqual(result.mode, "filter")
        self.assertEqual(self._ids(result), ["100", "300"])
        self.assertTrue(all(match.score is None for match in result.results))

    def test_free_text_and_constraints_intersect_in_store_order(self) -> None:
        constraints = ConstraintSet(categories={"Database": "1"})

        self.assertEqual(self._ids(self.coordinator.run_query(self.session, "cadd", constraints)), ["300"])
        self.assertEqual(self._ids(self.coordinator.run_query(self.session, "polyphen", constraints)), [])

    def test_fuzzy_results_are_capped(self) -> None:
        coordinator = _coordinator(_numbered(60), page_size=100)
        result = coordinator.run_query(coordinator.new_session(), "variant effect")
        self.assertEqual(result.mode, "fuzzy")
        self.assertEqual(result.total_matches, 50)
        self.assertEqual(len(result.results), 50)

    def test_filter_results_are_not_capped(self) -> None:
        coordinator = _coordinator(_numbered(60), page_size=100)
        result = coordinator.run_query(coordinator.new_session(), "", ConstraintSet(categories={"Database": "1"}))
        self.assertEqual(result.total_matches, 60)

    def test_invalid_settings_are_rejected(self) -> None:
        with self.assertRaises(QueryError):
            _coordinator([], page_size=0)
        with self.assertRaises(QueryError):
            _coordinator([], empty_query="everything")


class TestPagination(unittest.TestCase):
    def setUp(self) -> None:
        self.coordinator = _coordinator(_numbered(120))
        self.session = self.coordinator.new_session()

    def test_total_pages_is_ceiling(self) -> None:
        result = self.coordinator.run_query(self.session, "")
        self.assertEqual(result.total_matches, 120)
        self.assertEqual(result.total_pages, 3)
        self.assertEqual(len(result.results), 50)
        self.assertEqual(result.records[0]["PubMed_ID"], "1000")

    def test_next_and_previous_slice_without_requery(self) -> None:
        self.coordinator.run_query(self.session, "")

        second = self.coordinator.next_page(self.session)
        self.assertEqual(second.page, 2)
        self.assertEqual(second.records[0]["PubMed_ID"], "1050")

        third = self.coordinator.next_page(self.session)
        self.assertEqual(third.page, 3)
        self.assertEqual(len(third.results), 20)

        back = self.coordinator.previous_page(self.session)
        self.assertEqual(back.page, 2)

    def test_navigation_is_clamped_at_edges(self) -> None:
        self.coordinator.run_query(self.session, "")

        self.assertEqual(self.coordinator.previous_page(self.session).page, 1)
        for _ in range(5):
            last = self.coordinator.next_page(self.session)
        self.assertEqual(last.page, 3)
        self.assertEqual(last.records[-1]["PubMed_ID"], "1119")

    def test_navigation_on_empty_result_stays_on_first_page(self) -> None:
        self.coordinator.run_query(self.session, "cancer")
        self.assertEqual(self.coordinator.next_page(self.session).page, 1)
        self.assertEqual(self.coordinator.previous_page(self.session).page, 1)

    def test_changed_query_resets_page(self) -> None:
        self.coordinator.run_query(self.session, "")
        self.coordinator.next_page(self.session)

        result = self.coordinator.run_query(self.session, "", ConstraintSet(categories={"Database": "1"}))
        self.assertEqual(result.page, 1)

    def test_same_query_keeps_page(self) -> None:
        self.coordinator.run_query(self.session, "")
        self.coordinator.next_page(self.session)

        result = self.coordinator.run_query(self.session, "  ")
        self.assertEqual(result.page, 2)

    def test_sessions_are_independent(self) -> None:
        other = self.coordinator.new_session()
        self.coordinator.run_query(self.session, "")
        self.coordinator.run_query(other, "")
        self.coordinator.next_page(self.session)

        self.assertEqual(self.coordinator.current_page(self.session).page, 2)
        self.assertEqual(self.coordinator.current_page(other).page, 1)


class TestPageState(unittest.TestCase):
    def test_total_pages(self) -> None:
        self.assertEqual(PageState(page_size=50, total_items=0).total_pages, 0)
        self.assertEqual(PageState(page_size=50, total_items=1).total_pages, 1)
        self.assertEqual(PageState(page_size=50, total_items=50).total_pages, 1)
        self.assertEqual(PageState(page_size=50, total_items=51).total_pages, 2)

    def test_clamp_pulls_page_into_range(self) -> None:
        state = PageState(page_size=50, page=5, total_items=60)
        state.clamp()
        self.assertEqual(state.page, 2)

        empty = PageState(page_size=50, page=3, total_items=0)
        empty.clamp()
        self.assertEqual(empty.page, 1)


if __name__ == "__main__":
    unittest.main()
