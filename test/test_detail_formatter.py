"""Tests for record detail projection."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from VipFinder.core.models import BLANK, LINK, TEXT
from VipFinder.renderers.details import classify_value, project
from VipFinder.storage.records import load_record_store


class TestDetailOrdering(unittest.TestCase):
    def test_priority_fields_first_then_alphabetical(self) -> None:
        record = {
            "zeta": 1,
            "Year": 2020,
            "PubMed_ID": "1",
            "alpha": None,
            "Title": "T",
            "Homepage": "https://example.org",
            "Beta": "b",
        }

        keys = [entry.key for entry in project(record)]

        self.assertEqual(keys, ["PubMed_ID", "Title", "Homepage", "Year", "alpha", "Beta", "zeta"])

    def test_priority_order_is_fixed(self) -> None:
        record = {name: "x" for name in reversed(
            ["PubMed_ID", "Title", "VIP_name", "VIP_family_name", "Database", "DOI", "Homepage", "Source_code", "Year"]
        )}
        keys = [entry.key for entry in project(record)]
        self.assertEqual(
            keys,
            ["PubMed_ID", "Title", "VIP_name", "VIP_family_name", "Database", "DOI", "Homepage", "Source_code", "Year"],
        )

    def test_every_key_appears_exactly_once(self) -> None:
        store = load_record_store(str(REPO_ROOT / "data" / "vipdb.json"))
        for record in store:
            with self.subTest(pmid=record.get("PubMed_ID")):
                keys = [entry.key for entry in project(record)]
                self.assertEqual(sorted(keys), sorted(record.keys()))
                self.assertEqual(len(keys), len(set(keys)))

    def test_empty_record_projects_to_nothing(self) -> None:
        self.assertEqual(project({}), [])


class TestValueClassification(unittest.TestCase):
    def test_absent_value_is_blank_marker(self) -> None:
        value = classify_value(None)
        self.assertEqual(value.kind, BLANK)
        self.assertIsNone(value.text)

    def test_nan_is_blank(self) -> None:
        self.assertEqual(classify_value(float("nan")).kind, BLANK)

    def test_empty_string_stays_text(self) -> None:
        value = classify_value("")
        self.assertEqual(value.kind, TEXT)
        self.assertEqual(value.text, "")

    def test_http_urls_are_links(self) -> None:
        for url in ("https://cadd.gs.washington.edu/", "http://genetics.bwh.harvard.edu/pph2/", "HTTPS://EXAMPLE.ORG"):
            with self.subTest(url=url):
                value = classify_value(url)
                self.assertEqual(value.kind, LINK)
                self.assertEqual(value.href, url)
                self.assertEqual(value.text, url)

    def test_other_values_are_plain_text(self) -> None:
        self.assertEqual(classify_value("ftp://example.org").kind, TEXT)
        self.assertEqual(classify_value("see https://example.org").kind, TEXT)
        self.assertEqual(classify_value(1).text, "1")
        self.assertEqual(classify_value(2014.0).text, "2014")

    def test_projection_classifies_values(self) -> None:
        entries = {e.key: e.value for e in project({"Homepage": "https://x.org", "Source_code": None, "Year": 2016})}
        self.assertEqual(entries["Homepage"].kind, LINK)
        self.assertEqual(entries["Source_code"].kind, BLANK)
        self.assertEqual(entries["Year"].kind, TEXT)


if __name__ == "__main__":
    unittest.main()
