import itertools
import unittest

from corekit.comparer import (
    OrdinalComparer,
    SemiNumericComparer,
    compare_ordinal,
    compare_semi_numeric,
    natural_sort_key,
    natural_sorted,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


SAMPLES = [
    None,
    "",
    "A",
    "A1",
    "A01",
    "A2",
    "A10",
    "a10",
    "5",
    "10",
    "A10b",
    "A10b2",
    "file 9.txt",
    "file 10.txt",
    "Z",
    "track٣",
]


class TestSemiNumericComparer(unittest.TestCase):
    def test_reference_results(self) -> None:
        cases = [
            ("A10", "A2", 8),
            ("A2", "A10", -8),
            ("A1", "A1", 0),
            (None, "A10", -1),
            ("5", "A10", -1),
        ]
        comparer = SemiNumericComparer()
        for a, b, expected in cases:
            with self.subTest(a=a, b=b):
                self.assertEqual(comparer.compare(a, b), expected)

    def test_nulls(self) -> None:
        self.assertEqual(compare_semi_numeric(None, None), 0)
        self.assertEqual(compare_semi_numeric("", None), 1)
        self.assertEqual(compare_semi_numeric(None, ""), -1)

    def test_prefix_sorts_first(self) -> None:
        self.assertLess(compare_semi_numeric("A", "A1"), 0)
        self.assertGreater(compare_semi_numeric("A10b", "A10"), 0)
        self.assertLess(compare_semi_numeric("", "A"), 0)

    def test_mixed_tokens_fall_back_to_ordinal(self) -> None:
        # '1' < 'A' by code point, even though 100 > 1 would say otherwise.
        self.assertEqual(compare_semi_numeric("100", "A1"), -1)
        self.assertEqual(compare_semi_numeric("1A", "A1"), -1)
        self.assertEqual(compare_semi_numeric("A1", "1A"), 1)

    def test_shorter_alpha_run_sorts_first(self) -> None:
        self.assertEqual(compare_semi_numeric("A1", "AB"), -1)
        self.assertEqual(compare_semi_numeric("AB", "A1"), 1)

    def test_alpha_runs_compare_ordinally(self) -> None:
        self.assertEqual(compare_semi_numeric("B1", "a1"), -1)
        self.assertEqual(compare_semi_numeric("abc2", "abd1"), -1)

    def test_numbers_later_in_the_string(self) -> None:
        self.assertLess(compare_semi_numeric("v1.9.0", "v1.10.0"), 0)
        self.assertGreater(compare_semi_numeric("file 10.txt", "file 9.txt"), 0)

    def test_leading_zeros_compare_by_value(self) -> None:
        self.assertEqual(compare_semi_numeric("A01", "A1"), 0)
        self.assertLess(compare_semi_numeric("A01", "A2"), 0)

    def test_very_long_digit_runs(self) -> None:
        small = "x" + "1" * 5000
        large = "x" + "2" + "0" * 4999
        longer = "x" + "1" * 5001
        self.assertLess(compare_semi_numeric(small, large), 0)
        self.assertGreater(compare_semi_numeric(longer, large), 0)
        self.assertEqual(compare_semi_numeric(small, small), 0)

    def test_non_ascii_decimal_digits(self) -> None:
        self.assertLess(compare_semi_numeric("track٣", "track12"), 0)

    def test_reflexive(self) -> None:
        for value in SAMPLES:
            with self.subTest(value=value):
                self.assertEqual(compare_semi_numeric(value, value), 0)

    def test_antisymmetric(self) -> None:
        for a, b in itertools.product(SAMPLES, repeat=2):
            with self.subTest(a=a, b=b):
                self.assertEqual(
                    _sign(compare_semi_numeric(a, b)),
                    -_sign(compare_semi_numeric(b, a)),
                )

    def test_callable_and_named(self) -> None:
        comparer = SemiNumericComparer()
        self.assertEqual(comparer.name, "natural")
        self.assertEqual(comparer("A2", "A10"), -8)


class TestNaturalSorting(unittest.TestCase):
    def test_natural_sorted(self) -> None:
        values = ["A10", "A2", None, "A1", "B", "5"]
        self.assertEqual(natural_sorted(values), [None, "5", "A1", "A2", "A10", "B"])

    def test_natural_sorted_reverse(self) -> None:
        self.assertEqual(natural_sorted(["A2", "A10", "A1"], reverse=True), ["A10", "A2", "A1"])

    def test_natural_sorted_with_key(self) -> None:
        rows = [{"id": "item12"}, {"id": "item3"}, {"id": "item1"}]
        ordered = natural_sorted(rows, key=lambda row: row["id"])
        self.assertEqual([row["id"] for row in ordered], ["item1", "item3", "item12"])

    def test_sort_key_plugs_into_sorted(self) -> None:
        self.assertEqual(sorted(["x10", "x9"], key=natural_sort_key), ["x9", "x10"])
        self.assertEqual(sorted(["x10", "x9"], key=SemiNumericComparer().sort_key()), ["x9", "x10"])


class TestOrdinalComparer(unittest.TestCase):
    def test_plain_code_point_order(self) -> None:
        comparer = OrdinalComparer()
        self.assertEqual(comparer.name, "ordinal")
        self.assertEqual(comparer.compare("A10", "A2"), -1)
        self.assertEqual(comparer("A2", "A10"), 1)
        self.assertEqual(comparer.compare("A", "A"), 0)

    def test_nulls_first(self) -> None:
        self.assertEqual(compare_ordinal(None, "A"), -1)
        self.assertEqual(compare_ordinal("A", None), 1)
        self.assertEqual(compare_ordinal(None, None), 0)

    def test_sort_key_uses_ordinal_order(self) -> None:
        self.assertEqual(sorted(["x9", "x10"], key=OrdinalComparer().sort_key()), ["x10", "x9"])


if __name__ == "__main__":
    unittest.main()
