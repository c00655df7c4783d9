from __future__ import annotations

import math
import unittest

import numpy as np

from densechart import ChartDataError
from densechart.adapters.normalize import classify_series, split_series


class ClassifySeriesTests(unittest.TestCase):
    def test_empty_and_missing_input_short_circuit(self) -> None:
        self.assertIsNone(classify_series([]))
        self.assertIsNone(classify_series(None))

    def test_scalar_values_are_single_series(self) -> None:
        shape = classify_series([[0, 1.5], [1, None]])
        assert shape is not None
        self.assertEqual(shape.kind, "single")
        self.assertEqual(shape.arity, 1)
        self.assertFalse(shape.is_multi)

    def test_array_values_are_multi_series_with_observed_arity(self) -> None:
        shape = classify_series([[0, [1.0, 2.0, None]], [1, [2.0, 3.0, 4.0]]])
        assert shape is not None
        self.assertTrue(shape.is_multi)
        self.assertEqual(shape.arity, 3)

    def test_only_first_element_decides_shape(self) -> None:
        shape = classify_series([[0, None], [1, [1, 2]]])
        assert shape is not None
        self.assertEqual(shape.kind, "single")


class SplitSeriesTests(unittest.TestCase):
    def test_single_series_nulls_become_gaps(self) -> None:
        raw = [[0, 1.0], [1, None], [2, "n/a"], [3, 4]]
        (series,) = split_series(raw, classify_series(raw))
        np.testing.assert_array_equal(series.x, [0.0, 1.0, 2.0, 3.0])
        self.assertEqual(series.y[0], 1.0)
        self.assertTrue(math.isnan(series.y[1]))
        self.assertTrue(math.isnan(series.y[2]))
        self.assertEqual(series.finite_count(), 2)

    def test_multi_series_splits_into_parallel_series(self) -> None:
        raw = [[10, [1, 2, 3]], [11, [4, None, 6]]]
        parts = split_series(raw, classify_series(raw))
        self.assertEqual(len(parts), 3)
        for part in parts:
            np.testing.assert_array_equal(part.x, [10.0, 11.0])
        np.testing.assert_array_equal(parts[0].y, [1.0, 4.0])
        self.assertTrue(math.isnan(parts[1].y[1]))
        np.testing.assert_array_equal(parts[2].y, [3.0, 6.0])

    def test_arity_mismatch_fails_loudly(self) -> None:
        raw = [[0, [1, 2, 3]], [1, [1, 2]]]
        with self.assertRaises(ChartDataError):
            split_series(raw, classify_series(raw))

    def test_mixed_shapes_fail_loudly(self) -> None:
        raw = [[0, 1.0], [1, [1.0, 2.0]]]
        with self.assertRaises(ChartDataError):
            split_series(raw, classify_series(raw))
        raw = [[0, [1.0, 2.0]], [1, 3.0]]
        with self.assertRaises(ChartDataError):
            split_series(raw, classify_series(raw))

    def test_malformed_pairs_and_x_values_fail_loudly(self) -> None:
        with self.assertRaises(ChartDataError):
            classify_series([[0, 1, 2]])
        raw = [[0, 1.0], ["later", 2.0]]
        with self.assertRaises(ChartDataError):
            split_series(raw, classify_series(raw))
        raw = [[0, 1.0], [None, 2.0]]
        with self.assertRaises(ChartDataError):
            split_series(raw, classify_series(raw))

    def test_integers_beyond_float_range(self) -> None:
        raw = [[0, 1], [1, 10**400], [2, -(10**400)], [3, 4]]
        (series,) = split_series(raw, classify_series(raw))
        np.testing.assert_array_equal(series.defined, [True, False, False, True])
        raw = [[0, [1, 10**400]], [1, [2, 3]]]
        parts = split_series(raw, classify_series(raw))
        self.assertTrue(math.isnan(parts[1].y[0]))
        raw = [[0, 1.0], [10**400, 2.0]]
        with self.assertRaises(ChartDataError):
            split_series(raw, classify_series(raw))

    def test_chart_data_error_is_a_value_error(self) -> None:
        self.assertTrue(issubclass(ChartDataError, ValueError))


if __name__ == "__main__":
    unittest.main()
