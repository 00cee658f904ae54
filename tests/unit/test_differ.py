"""Tests for the structural differ: traversal order, kinds and paths.

All tests are hermetic: trees are built in memory, no disk I/O.
"""

from __future__ import annotations

import math
import unittest
from dataclasses import FrozenInstanceError

from treediff.core.differ import DiffPolicy, compare, diff, scalars_equal
from treediff.core.types import (
    ABSENT,
    ROOT,
    Discrepancy,
    DiscrepancyKind,
    NodePath,
)

K = DiscrepancyKind


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _summary(discrepancies):
    return [(str(d.path), d.kind) for d in discrepancies]


def _nested_lists(depth: int, leaf: list) -> list:
    root = current = []
    for _ in range(depth - 1):
        nxt: list = []
        current.append(nxt)
        current = nxt
    current.extend(leaf)
    return root


EXPECTED_DOC = {
    "id": 1,
    "name": "John",
    "details": {
        "city": "London",
        "phones": ["123", "456"],
        "address": {"line1": "10 Downing", "zip": "SW1"},
    },
}

ACTUAL_DOC = {
    "id": 1,
    "name": "Johnny",
    "details": {
        "city": "Paris",
        "phones": ["123"],
        "address": {"line1": "11 Downing", "zip": "SW1", "country": "UK"},
    },
    "extraField": "ignored",
}


# ============================================================================
# End-to-end scenario
# ============================================================================


class TestEndToEnd(unittest.TestCase):
    def test_customer_documents(self):
        result = diff(EXPECTED_DOC, ACTUAL_DOC)
        self.assertEqual(
            _summary(result),
            [
                ("name", K.VALUE_MISMATCH),
                ("details.city", K.VALUE_MISMATCH),
                ("details.phones", K.ARRAY_SHRUNK),
                ("details.address.line1", K.VALUE_MISMATCH),
                ("details.address.country", K.EXTRA_FIELD),
                ("extraField", K.EXTRA_FIELD),
            ],
        )

    def test_customer_documents_values(self):
        result = diff(EXPECTED_DOC, ACTUAL_DOC)
        self.assertEqual((result[0].expected, result[0].actual), ("John", "Johnny"))
        self.assertEqual((result[1].expected, result[1].actual), ("London", "Paris"))
        self.assertEqual(result[2].count, 1)
        self.assertEqual(result[3].actual, "11 Downing")
        self.assertIs(result[4].expected, ABSENT)
        self.assertEqual(result[4].actual, "UK")
        self.assertEqual(result[5].actual, "ignored")


# ============================================================================
# Properties
# ============================================================================


class TestReflexivity(unittest.TestCase):
    def test_same_object(self):
        self.assertEqual(diff(EXPECTED_DOC, EXPECTED_DOC), [])

    def test_equal_copies(self):
        import copy

        self.assertEqual(diff(EXPECTED_DOC, copy.deepcopy(EXPECTED_DOC)), [])

    def test_scalars_and_empties(self):
        for value in [None, 0, 1.5, "", "x", True, False, [], {}, [[]], {"a": {}}]:
            with self.subTest(value=value):
                self.assertEqual(diff(value, value), [])

    def test_nan_equal_copies(self):
        self.assertEqual(diff({"v": float("nan")}, {"v": float("nan")}), [])


class TestAbsence(unittest.TestCase):
    def test_both_absent(self):
        self.assertEqual(diff(ABSENT, ABSENT), [])

    def test_expected_absent(self):
        path = NodePath().child("a").index(2)
        for value in [None, 1, "x", [1, 2], {"k": "v"}]:
            with self.subTest(value=value):
                result = list(compare(ABSENT, value, path))
                self.assertEqual(len(result), 1)
                self.assertEqual(result[0].kind, K.EXTRA_NODE)
                self.assertEqual(result[0].path, path)
                self.assertIs(result[0].expected, ABSENT)
                self.assertEqual(result[0].actual, value)

    def test_actual_absent(self):
        for value in [None, 1, "x", [1, 2], {"k": {"deep": [1]}}]:
            with self.subTest(value=value):
                result = diff(value, ABSENT)
                self.assertEqual(len(result), 1)
                self.assertEqual(result[0].kind, K.MISSING_NODE)
                self.assertEqual(result[0].path, ROOT)
                self.assertIs(result[0].actual, ABSENT)

    def test_null_is_not_absent(self):
        result = diff({"a": None}, {"a": 0})
        self.assertEqual(_summary(result), [("a", K.VALUE_MISMATCH)])
        self.assertIsNone(result[0].expected)

    def test_null_field_vs_missing_field(self):
        self.assertEqual(_summary(diff({"a": None}, {})), [("a", K.MISSING_FIELD)])
        self.assertEqual(_summary(diff({}, {"a": None})), [("a", K.EXTRA_FIELD)])


class TestObjects(unittest.TestCase):
    def test_order_follows_expected(self):
        expected = {"a": {"x": 1}, "b": {"x": 1}, "c": {"x": 1}}
        actual = {"c": {"x": 2}, "b": {"x": 2}, "a": {"x": 2}}
        self.assertEqual(
            [str(d.path) for d in diff(expected, actual)], ["a.x", "b.x", "c.x"]
        )

    def test_extra_fields_after_expected_fields_in_actual_order(self):
        expected = {"a": 1, "b": 1}
        actual = {"z": 0, "b": 2, "y": 0, "a": 1}
        self.assertEqual(
            _summary(diff(expected, actual)),
            [("b", K.VALUE_MISMATCH), ("z", K.EXTRA_FIELD), ("y", K.EXTRA_FIELD)],
        )

    def test_missing_field_not_recursed(self):
        result = diff({"a": {"b": {"c": 1}}}, {})
        self.assertEqual(_summary(result), [("a", K.MISSING_FIELD)])
        self.assertEqual(result[0].expected, {"b": {"c": 1}})

    def test_extra_field_not_recursed(self):
        result = diff({}, {"a": [1, {"b": 2}]})
        self.assertEqual(_summary(result), [("a", K.EXTRA_FIELD)])
        self.assertEqual(result[0].actual, [1, {"b": 2}])

    def test_nested_field_paths(self):
        result = diff({"a": {"b": {"c": 1}}}, {"a": {"b": {"c": 2}}})
        self.assertEqual(result[0].path, NodePath().child("a").child("b").child("c"))
        self.assertEqual(str(result[0].path), "a.b.c")


class TestArrays(unittest.TestCase):
    def test_same_length_positional(self):
        self.assertEqual(
            _summary(diff([1, 2, 3], [1, 4, 3])), [("[1]", K.VALUE_MISMATCH)]
        )

    def test_shrunk_single_record(self):
        result = diff([1, 2, 3, 4, 5], [9, 2])
        self.assertEqual(
            _summary(result), [("[0]", K.VALUE_MISMATCH), ("", K.ARRAY_SHRUNK)]
        )
        self.assertEqual(result[-1].count, 3)

    def test_grown_single_record(self):
        result = diff({"xs": [1]}, {"xs": [1, 2, 3]})
        self.assertEqual(_summary(result), [("xs", K.ARRAY_GROWN)])
        self.assertEqual(result[0].count, 2)
        self.assertEqual(result[0].expected, [1])
        self.assertEqual(result[0].actual, [1, 2, 3])

    def test_size_record_follows_elements(self):
        result = diff([{"a": 1}, {"a": 1}], [{"a": 2}])
        self.assertEqual(
            _summary(result), [("[0].a", K.VALUE_MISMATCH), ("", K.ARRAY_SHRUNK)]
        )

    def test_move_reported_per_index(self):
        result = diff(["a", "b"], ["b", "a"])
        self.assertEqual(
            _summary(result), [("[0]", K.VALUE_MISMATCH), ("[1]", K.VALUE_MISMATCH)]
        )

    def test_tuple_is_array(self):
        self.assertEqual(diff((1, 2), [1, 2]), [])

    def test_empty_arrays(self):
        self.assertEqual(_summary(diff([], [1])), [("", K.ARRAY_GROWN)])
        self.assertEqual(_summary(diff([1], [])), [("", K.ARRAY_SHRUNK)])

    def test_index_paths_inside_objects(self):
        result = diff({"m": [[0, 1]]}, {"m": [[0, 2]]})
        self.assertEqual(str(result[0].path), "m[0][1]")


class TestTypeMismatch(unittest.TestCase):
    def test_object_vs_scalar(self):
        result = diff({"p": {"a": {"b": 1}}}, {"p": 5})
        self.assertEqual(_summary(result), [("p", K.VALUE_MISMATCH)])
        self.assertEqual(result[0].expected, {"a": {"b": 1}})
        self.assertEqual(result[0].actual, 5)

    def test_object_vs_array(self):
        self.assertEqual(_summary(diff({}, [])), [("", K.VALUE_MISMATCH)])

    def test_array_vs_null(self):
        self.assertEqual(_summary(diff([1], None)), [("", K.VALUE_MISMATCH)])

    def test_string_vs_number(self):
        self.assertEqual(_summary(diff("1", 1)), [("", K.VALUE_MISMATCH)])


class TestScalarEquality(unittest.TestCase):
    def test_bool_is_not_int(self):
        self.assertFalse(scalars_equal(True, 1))
        self.assertFalse(scalars_equal(0, False))
        self.assertTrue(scalars_equal(True, True))

    def test_int_float_numeric(self):
        self.assertTrue(scalars_equal(1, 1.0))
        self.assertFalse(scalars_equal(1, 1.0, strict_numbers=True))
        self.assertTrue(scalars_equal(2, 2, strict_numbers=True))

    def test_nan(self):
        self.assertTrue(scalars_equal(float("nan"), math.nan))
        self.assertFalse(scalars_equal(float("nan"), 1.0))

    def test_none(self):
        self.assertTrue(scalars_equal(None, None))
        self.assertFalse(scalars_equal(None, ""))
        self.assertFalse(scalars_equal(None, 0))


# ============================================================================
# Sequence behaviour
# ============================================================================


class TestSequence(unittest.TestCase):
    def test_lazy(self):
        it = compare({"a": 1, "b": 2}, {"a": 0, "b": 0})
        first = next(it)
        self.assertEqual(str(first.path), "a")

    def test_restartable(self):
        runs = [list(compare(EXPECTED_DOC, ACTUAL_DOC)) for _ in range(10)]
        for r in runs[1:]:
            self.assertEqual(r, runs[0])

    def test_inputs_not_mutated(self):
        import copy

        before_e = copy.deepcopy(EXPECTED_DOC)
        before_a = copy.deepcopy(ACTUAL_DOC)
        diff(EXPECTED_DOC, ACTUAL_DOC)
        self.assertEqual(EXPECTED_DOC, before_e)
        self.assertEqual(ACTUAL_DOC, before_a)

    def test_start_path_prefixes_results(self):
        start = NodePath().child("payload")
        result = list(compare({"a": 1}, {"a": 2}, start))
        self.assertEqual(str(result[0].path), "payload.a")

    def test_deep_tree_beyond_recursion_limit(self):
        depth = 3000
        expected = _nested_lists(depth, [])
        actual = _nested_lists(depth, [1])
        result = diff(expected, actual)
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].kind, K.ARRAY_GROWN)
        self.assertEqual(result[0].path.depth, depth - 1)
        self.assertEqual(result[0].count, 1)

    def test_discrepancy_is_frozen(self):
        d = Discrepancy(ROOT, K.VALUE_MISMATCH, 1, 2)
        with self.assertRaises(FrozenInstanceError):
            d.kind = K.EXTRA_NODE


# ============================================================================
# Policy
# ============================================================================


class TestDiffPolicy(unittest.TestCase):
    def test_default_policy(self):
        policy = DiffPolicy.default()
        self.assertEqual(policy.ignore_fields, frozenset())
        self.assertFalse(policy.strict_numbers)

    def test_ignore_fields_any_depth(self):
        policy = DiffPolicy.default().with_ignored(["ts"])
        expected = {"ts": 1, "a": {"ts": 2, "v": 1}, "items": [{"ts": 3}]}
        actual = {"a": {"ts": 9, "v": 1}, "items": [{"ts": 4, "x": 1}]}
        self.assertEqual(
            _summary(diff(expected, actual, policy)),
            [("items[0].x", K.EXTRA_FIELD)],
        )

    def test_strict_numbers(self):
        self.assertEqual(diff({"n": 1}, {"n": 1.0}), [])
        self.assertEqual(
            _summary(diff({"n": 1}, {"n": 1.0}, DiffPolicy.strict())),
            [("n", K.VALUE_MISMATCH)],
        )

    def test_with_ignored_keeps_strictness(self):
        policy = DiffPolicy.strict().with_ignored(["a"]).with_ignored(["b"])
        self.assertTrue(policy.strict_numbers)
        self.assertEqual(policy.ignore_fields, frozenset({"a", "b"}))


if __name__ == "__main__":
    unittest.main()
