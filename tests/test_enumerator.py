import math
import unittest
from fractions import Fraction
from itertools import islice

import numpy as np

from iter_rationals import (
    INTEGER_TYPES,
    IntegerConversionError,
    IntegerOverflowError,
    IntegerType,
    Rational,
    Rationals,
    rationals_array,
)


class RationalsTests(unittest.TestCase):
    def test_first_values_are_as_expected(self):
        expected_parts = [
            (1, 1), (1, 2), (2, 1), (1, 3), (3, 2), (2, 3), (3, 1), (1, 4),
            (4, 3), (3, 5), (5, 2), (2, 5), (5, 3), (3, 4), (4, 1),
        ]
        found = Rationals("u32").take(len(expected_parts))
        self.assertEqual([r.as_tuple() for r in found], expected_parts)
        self.assertTrue(all(r.integer_type.name == "u32" for r in found))

    def test_millionth_value(self):
        self.assertEqual(Rationals("u32").nth(1_000_000), Rational(1287, 1096))

    def test_builtin_types(self):
        limit = 32
        expected = Rationals(int).nth(limit)
        for name, integer_type in INTEGER_TYPES.items():
            with self.subTest(integer_type=name):
                value = Rationals(integer_type).nth(limit)
                self.assertEqual(value, expected)
                self.assertEqual(value.integer_type, integer_type)

    def test_numpy_dtypes_accepted(self):
        for dtype in (np.uint8, np.int16, np.uint32, np.int64, np.uintp, np.intp):
            with self.subTest(dtype=dtype):
                self.assertEqual(Rationals(dtype).nth(10), Rational(5, 2))

    def test_prefix_is_distinct_positive_and_reduced(self):
        values = Rationals().take(5000)
        self.assertEqual(len(set(values)), len(values))
        for r in values:
            self.assertGreater(r.numerator, 0)
            self.assertGreater(r.denominator, 0)
            self.assertEqual(math.gcd(r.numerator, r.denominator), 1)

    def test_successor_rule(self):
        values = [r.as_fraction() for r in Rationals().take(500)]
        for current, following in zip(values, values[1:]):
            whole = math.floor(current)
            self.assertEqual(following, 1 / (whole + 1 - (current - whole)))

    def test_small_rationals_all_appear(self):
        seen = {r.as_tuple() for r in Rationals().take(255)}
        for p in range(1, 9):
            for q in range(1, 9):
                if math.gcd(p, q) == 1:
                    self.assertIn((p, q), seen)

    def test_independent_instances(self):
        a = Rationals("i64")
        b = Rationals("i64")
        self.assertEqual(a.take(100), b.take(100))
        a.skip(10)
        self.assertEqual(a.take(5), b.skip(10).take(5))

    def test_iterator_protocol(self):
        rationals = Rationals()
        self.assertIs(iter(rationals), rationals)
        self.assertEqual([str(r) for r in islice(rationals, 4)], ["1", "1/2", "2", "1/3"])
        self.assertEqual(next(rationals), Fraction(3, 2))

    def test_nth_take_and_skip(self):
        self.assertEqual(Rationals().nth(0), 1)
        self.assertEqual(Rationals().skip(5).take(3), Rationals().take(8)[5:])
        self.assertEqual(Rationals().take(0), [])
        rationals = Rationals()
        self.assertEqual(rationals.nth(2), 2)
        self.assertEqual(rationals.nth(0), Rational(1, 3))
        with self.assertRaises(ValueError):
            Rationals().nth(-1)
        with self.assertRaises(ValueError):
            Rationals().take(-1)

    def test_range_exhaustion_raises(self):
        rationals = Rationals("u8")
        produced = 0
        with self.assertRaises(IntegerOverflowError):
            for _ in range(100_000):
                rationals.produce_next_value()
                produced += 1
        self.assertGreater(produced, 32)
        # The failed step leaves the state alone, so it fails again.
        with self.assertRaises(IntegerOverflowError):
            rationals.produce_next_value()

    def test_unbounded_type_does_not_exhaust(self):
        wide = Rationals(int).skip(20_000).take(3)
        bounded = Rationals("u64").skip(20_000).take(3)
        self.assertEqual(wide, bounded)

    def test_type_that_cannot_hold_one(self):
        with self.assertRaises(IntegerConversionError):
            Rationals(IntegerType("i1", 1, True))

    def test_integer_type_property(self):
        self.assertEqual(Rationals("i16").integer_type, INTEGER_TYPES["i16"])


class RationalsArrayTests(unittest.TestCase):
    def test_array_shape_and_dtype(self):
        array = rationals_array(7)
        self.assertEqual(array.shape, (7, 2))
        self.assertEqual(array.dtype, np.uint32)
        np.testing.assert_array_equal(array[:, 0], [1, 1, 2, 1, 3, 2, 3])
        np.testing.assert_array_equal(array[:, 1], [1, 2, 1, 3, 2, 3, 1])

    def test_array_start_offset(self):
        array = rationals_array(2, integer_type="i8", start=13)
        self.assertEqual(array.dtype, np.int8)
        np.testing.assert_array_equal(array, [[3, 4], [4, 1]])

    def test_wide_types_use_object_arrays(self):
        array = rationals_array(3, integer_type="u128")
        self.assertEqual(array.dtype, object)
        self.assertEqual(array.tolist(), [[1, 1], [1, 2], [2, 1]])

    def test_empty_array(self):
        self.assertEqual(rationals_array(0).shape, (0, 2))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
