from collections import Counter, defaultdict
from unittest import TestCase

from topocontainers.merge import CapacityError, merge_fixed, merge_mapping, merge_sequence

from .utils import EDGES, OrderAssertMixin

# Linearization of EDGES with sorted keys
ORDER = ["F", "E", "A", "C", "D", "B"]


class TestMergeMapping(OrderAssertMixin, TestCase):
    def test_merge(self):
        mapping = {"A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5, "X": 100, "Y": 101, "Z": 102}
        res = merge_mapping(ORDER, mapping)
        self.assertEqual(res, [
            ("F", 5), ("E", 4), ("A", 0), ("C", 2), ("D", 3), ("B", 1),
            ("X", 100), ("Y", 101), ("Z", 102)])

    def test_unconstrained_keep_order(self):
        mapping = {"Z": 1, "A": 2, "M": 3, "C": 4}
        res = merge_mapping(["C", "A"], mapping)
        self.assertEqual([k for k, v in res], ["C", "A", "Z", "M"])

    def test_dangling(self):
        mapping = {"A": 0, "X": 1}
        res = merge_mapping(["Q", "A", "R"], mapping)
        self.assertEqual(res, [("A", 0), ("X", 1)])

    def test_dangling_with_default_values(self):
        # Mappings with __missing__ must not make up values for keys that are
        # only mentioned by constraints
        mapping = defaultdict(int, {"A": 2})
        self.assertEqual(merge_mapping(["Q", "A"], mapping), [("A", 2)])
        self.assertNotIn("Q", mapping)
        self.assertEqual(len(mapping), 1)

        counts = Counter({"A": 2, "X": 1})
        self.assertEqual(merge_mapping(["Q", "A", "R"], counts), [("A", 2), ("X", 1)])
        self.assertNotIn("Q", counts)

    def test_bijection(self):
        mapping = {k: i for i, k in enumerate("XAYBCZ")}
        res = merge_mapping(ORDER, mapping)
        self.assertEqual(len(res), len(mapping))
        self.assertEqual(dict(res), mapping)
        self.assertRespects([k for k, v in res], EDGES)

    def test_empty(self):
        self.assertEqual(merge_mapping(ORDER, {}), [])
        self.assertEqual(merge_mapping([], {"a": 1}), [("a", 1)])

    def test_result_is_new(self):
        mapping = {"a": [1]}
        res = merge_mapping([], mapping)
        res.append(("b", 2))
        self.assertEqual(mapping, {"a": [1]})


class TestMergeSequence(OrderAssertMixin, TestCase):
    def test_duplicates(self):
        items = list("AAABBCCDDEEFFF")
        res = merge_sequence(["Z"] + ORDER, items)
        self.assertEqual(res, list("FFFEEAAACCDDBB"))
        self.assertEqual(Counter(res), Counter(items))

    def test_unconstrained_after(self):
        items = ["x", "B", "y", "F", "x", "A"]
        res = merge_sequence(ORDER, items)
        self.assertEqual(res, ["F", "A", "B", "x", "x", "y"])
        self.assertRespects(res, EDGES)

    def test_no_constraints(self):
        items = [3, 1, 3, 2, 1]
        self.assertEqual(merge_sequence([], items), [3, 3, 1, 1, 2])

    def test_dangling(self):
        self.assertEqual(merge_sequence(["Q", "a"], ["b", "a"]), ["a", "b"])

    def test_empty(self):
        self.assertEqual(merge_sequence(ORDER, []), [])

    def test_input_unchanged(self):
        items = ["b", "a"]
        res = merge_sequence(["a", "b"], items)
        self.assertEqual(res, ["a", "b"])
        self.assertEqual(items, ["b", "a"])
        self.assertIsNot(res, items)


class TestMergeFixed(TestCase):
    def test_merge(self):
        items = ["A", "B", "C", "D", "E", "F", "X", "Y", "Z"]
        res = merge_fixed(ORDER, items)
        self.assertEqual(res, ["F", "E", "A", "C", "D", "B", "X", "Y", "Z"])

    def test_duplicates(self):
        items = list("AAABBCCDDEEFFF")
        self.assertEqual(merge_fixed(ORDER, items), list("FFFEEAAACCDDBB"))

    def test_capacity_exceeded(self):
        with self.assertRaises(CapacityError) as e:
            merge_fixed(ORDER, ["A", "B", "B"], capacity=2)
        self.assertEqual(str(e.exception), "'B': writing 2 elements at position 1 exceeds capacity 2")

    def test_capacity_is_value_error(self):
        with self.assertRaises(ValueError):
            merge_fixed([], [1], capacity=0)

    def test_fill(self):
        self.assertEqual(merge_fixed(["b"], ["a", "b"], capacity=4), ["b", "a", None, None])
        self.assertEqual(merge_fixed([], ["a"], capacity=2, fill=""), ["a", ""])
