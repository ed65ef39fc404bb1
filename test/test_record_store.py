"""Tests for record store loading."""

from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from VipFinder.storage.records import LoadError, RecordStore, load_record_store


class TestRecordStore(unittest.TestCase):
    def test_load_keeps_document_order(self) -> None:
        store = RecordStore.load([{"PubMed_ID": "3"}, {"PubMed_ID": "1"}, {"PubMed_ID": "2"}])

        self.assertEqual(len(store), 3)
        self.assertEqual([r["PubMed_ID"] for r in store.all()], ["3", "1", "2"])
        self.assertEqual([r["PubMed_ID"] for r in store], ["3", "1", "2"])

    def test_records_are_read_only(self) -> None:
        store = RecordStore.load([{"Title": "SIFT"}])
        with self.assertRaises(TypeError):
            store.all()[0]["Title"] = "changed"  # type: ignore[index]

    def test_source_list_mutation_does_not_leak(self) -> None:
        raw = [{"Title": "SIFT"}]
        store = RecordStore.load(raw)
        raw[0]["Title"] = "changed"
        raw.append({"Title": "extra"})

        self.assertEqual(len(store), 1)
        self.assertEqual(store.all()[0]["Title"], "SIFT")

    def test_non_array_root_is_rejected(self) -> None:
        with self.assertRaisesRegex(LoadError, "array"):
            RecordStore.load({"rows": []})

    def test_non_object_item_is_rejected(self) -> None:
        with self.assertRaisesRegex(LoadError, "item 1"):
            RecordStore.load([{"Title": "ok"}, "not a record"])

    def test_empty_array_loads(self) -> None:
        self.assertEqual(len(RecordStore.load([])), 0)


class TestLoadRecordStore(unittest.TestCase):
    def test_load_from_file(self) -> None:
        path = Path(tempfile.mkdtemp()) / "vipdb.json"
        path.write_text('[{"PubMed_ID": 100, "Title": "SIFT"}]', encoding="utf-8")

        store = load_record_store(str(path))

        self.assertEqual(len(store), 1)
        self.assertEqual(store.all()[0]["PubMed_ID"], 100)

    def test_invalid_json_raises_load_error(self) -> None:
        path = Path(tempfile.mkdtemp()) / "vipdb.json"
        path.write_text("[{", encoding="utf-8")
        with self.assertRaisesRegex(LoadError, "not valid JSON"):
            load_record_store(str(path))

    def test_non_utf8_file_raises_load_error(self) -> None:
        path = Path(tempfile.mkdtemp()) / "vipdb.json"
        path.write_bytes(b'[{"Title": "\xff\xfe"}]')
        with self.assertRaisesRegex(LoadError, "not valid UTF-8"):
            load_record_store(str(path))

    def test_missing_file_raises_load_error(self) -> None:
        missing = Path(tempfile.mkdtemp()) / "missing.json"
        with self.assertRaisesRegex(LoadError, "Failed to fetch"):
            load_record_store(str(missing))

    def test_object_document_raises_load_error(self) -> None:
        path = Path(tempfile.mkdtemp()) / "vipdb.json"
        path.write_text('{"PubMed_ID": 1}', encoding="utf-8")
        with self.assertRaises(LoadError):
            load_record_store(str(path))

    def test_bundled_sample_dataset_loads(self) -> None:
        store = load_record_store(str(REPO_ROOT / "data" / "vipdb.json"))
        self.assertGreater(len(store), 0)


if __name__ == "__main__":
    unittest.main()
