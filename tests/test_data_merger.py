from __future__ import annotations

import unittest
from pathlib import Path

from support import FixtureTestCase, build_fixtures

from docfmt.core.errors import DataError, UnsupportedDataFormat
from docfmt.rendering.data_merger import DataMerger, deep_merge, merge_all


class DeepMergeTests(unittest.TestCase):
    def test_null_deletes_key(self) -> None:
        merged = deep_merge({"a": {"x": 1, "y": 2}}, {"a": {"x": None}})
        self.assertEqual(merged, {"a": {"y": 2}})

    def test_null_for_absent_key_is_noop(self) -> None:
        self.assertEqual(deep_merge({"a": 1}, {"b": None}), {"a": 1})

    def test_sequences_are_replaced(self) -> None:
        self.assertEqual(deep_merge({"a": [1, 2]}, {"a": [3]}), {"a": [3]})

    def test_mapping_replaced_by_scalar_and_back(self) -> None:
        self.assertEqual(deep_merge({"a": {"x": 1}}, {"a": 5}), {"a": 5})
        self.assertEqual(deep_merge({"a": 5}, {"a": {"x": 1}}), {"a": {"x": 1}})

    def test_new_mapping_key_drops_nested_nulls(self) -> None:
        self.assertEqual(deep_merge({}, {"a": {"x": None, "y": 1}}), {"a": {"y": 1}})

    def test_inputs_are_not_mutated(self) -> None:
        base = {"a": {"x": 1}, "l": [1]}
        incoming = {"a": {"y": 2}, "l": [2]}
        merged = deep_merge(base, incoming)
        merged["l"].append(3)
        self.assertEqual(base, {"a": {"x": 1}, "l": [1]})
        self.assertEqual(incoming, {"a": {"y": 2}, "l": [2]})

    def test_later_files_take_precedence(self) -> None:
        merged = merge_all(
            {"k": "base", "only_base": True},
            [(Path("f1.json"), {"k": "f1", "only_f1": 1}), (Path("f2.json"), {"k": "f2"})],
        )
        self.assertEqual(merged, {"k": "f2", "only_base": True, "only_f1": 1})


class DataMergerTests(FixtureTestCase):
    def test_fixture_files_merge_in_declared_order(self) -> None:
        outcome = DataMerger().load_all({}, [self.data / "data1.toml", self.data / "data2.json"])
        self.assertTrue(outcome.ok, outcome.errors)
        self.assertEqual(outcome.value, build_fixtures.EXPECTED_DATA)

    def test_reverse_order_changes_the_winner(self) -> None:
        outcome = DataMerger().load_all({}, [self.data / "data2.json", self.data / "data1.toml"])
        self.assertEqual(outcome.value["title"], "This is a title")
        self.assertEqual(outcome.value["person"], {"firstName": "Jane", "lastName": "Doe"})

    def test_inline_base_is_merged_first(self) -> None:
        outcome = DataMerger().load_all(
            {"title": "inline", "extra": {"keep": True}},
            [self.data / "data1.toml"],
        )
        self.assertEqual(outcome.value["title"], "This is a title")
        self.assertEqual(outcome.value["extra"], {"keep": True})

    def test_no_files_yields_base(self) -> None:
        outcome = DataMerger().load_all(None, [])
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.value, {})

    def test_unsupported_extension(self) -> None:
        path = self.write("data/values.yaml", "a: 1")
        upper = self.write("data/values.JSON", "{}")
        outcome = DataMerger().load_all({}, [path, upper])
        self.assertFalse(outcome.ok)
        self.assertEqual(len(outcome.errors), 2)
        for err in outcome.errors:
            self.assertIsInstance(err, UnsupportedDataFormat)

    def test_errors_are_aggregated_and_no_context_returned(self) -> None:
        bad_json = self.write("data/bad.json", "{not json")
        bad_toml = self.write("data/bad.toml", "= nope")
        outcome = DataMerger().load_all({}, [
            self.data / "data1.toml",
            bad_json,
            self.data / "missing.json",
            bad_toml,
        ])
        self.assertFalse(outcome.ok)
        self.assertIsNone(outcome.value)
        self.assertEqual(len(outcome.errors), 3)
        self.assertEqual(
            [e.path for e in outcome.errors],
            [bad_json, self.data / "missing.json", bad_toml],
        )

    def test_top_level_must_be_a_mapping(self) -> None:
        path = self.write("data/list.json", "[1, 2]")
        outcome = DataMerger().load_all({}, [path])
        self.assertIsInstance(outcome.errors[0], DataError)

    def test_lone_surrogate_escape_is_rejected(self) -> None:
        path = self.write("data/surrogate.json", '{"name": "\\ud800", "ok": "fine"}')
        key = self.write("data/surrogate_key.json", '{"nested": {"\\udfff": 1}}')
        outcome = DataMerger().load_all({}, [path, key])
        self.assertIsNone(outcome.value)
        self.assertEqual(len(outcome.errors), 2)
        for err in outcome.errors:
            self.assertIsInstance(err, DataError)
        self.assertEqual([e.path for e in outcome.errors], [path, key])

    def test_escaped_surrogate_pair_is_accepted(self) -> None:
        path = self.write("data/emoji.json", '{"icon": "\\ud83d\\ude00"}')
        outcome = DataMerger().load_all({}, [path])
        self.assertTrue(outcome.ok, outcome.errors)
        self.assertEqual(outcome.value["icon"], "\U0001F600")

    def test_toml_dates_become_strings(self) -> None:
        path = self.write("data/dates.toml", "released = 2024-05-01\nat = 2024-05-01T10:00:00Z\n")
        outcome = DataMerger().load_all({}, [path])
        self.assertEqual(outcome.value["released"], "2024-05-01")
        self.assertTrue(outcome.value["at"].startswith("2024-05-01T10:00:00"))


if __name__ == "__main__":
    unittest.main()
