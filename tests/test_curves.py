from __future__ import annotations

import re
import unittest

import numpy as np

from densechart.curves import monotone_x_path, series_path
from densechart.scales import LinearScale
from densechart.series import SeriesData


def _path(xs: list[float], ys: list[float], defined: list[bool] | None = None) -> str:
    x = np.asarray(xs, dtype=np.float64)
    y = np.asarray(ys, dtype=np.float64)
    mask = np.ones(x.size, dtype=bool) if defined is None else np.asarray(defined, dtype=bool)
    return monotone_x_path(x, y, mask)


def _numbers(chunk: str) -> list[float]:
    return [float(v) for v in re.split(r",", chunk) if v]


class MonotonePathTests(unittest.TestCase):
    def test_two_points_draw_a_straight_segment(self) -> None:
        self.assertEqual(_path([0, 10], [0, 10]), "M0,0L10,10")

    def test_lone_point_is_a_closed_subpath(self) -> None:
        self.assertEqual(_path([5], [5]), "M5,5Z")

    def test_empty_input_draws_nothing(self) -> None:
        self.assertEqual(_path([], []), "")

    def test_three_points_draw_two_cubic_segments(self) -> None:
        d = _path([0, 1, 2], [0, 1, 0])
        self.assertTrue(d.startswith("M0,0C"))
        self.assertEqual(d.count("C"), 2)
        self.assertNotIn("L", d)

    def test_local_extremum_has_flat_tangent(self) -> None:
        d = _path([0, 3, 6], [0, 3, 0])
        first = _numbers(d.split("C")[1])
        # Second control point of the rising segment sits level with the peak.
        self.assertEqual(first[3], 3.0)

    def test_undefined_points_split_the_curve(self) -> None:
        d = _path([0, 1, 2, 3, 4, 5], [0, 1, 0, 0, 2, 3], [True, True, False, True, True, True])
        self.assertEqual(d.count("M"), 2)
        self.assertTrue(d.startswith("M0,0L1,1M3,0"))

    def test_curve_never_overshoots_segment_range(self) -> None:
        xs = [0.0, 1.0, 2.5, 3.0, 5.0, 6.0, 9.0]
        ys = [0.0, 10.0, 10.0, 0.0, 5.0, 5.5, 20.0]
        d = _path(xs, ys)
        segments = d[1:].split("C")
        prev_end = _numbers(segments[0])
        for chunk in segments[1:]:
            c1x, c1y, c2x, c2y, x1, y1 = _numbers(chunk)
            lo, hi = min(prev_end[1], y1), max(prev_end[1], y1)
            self.assertGreaterEqual(c1y, lo - 1e-9)
            self.assertLessEqual(c1y, hi + 1e-9)
            self.assertGreaterEqual(c2y, lo - 1e-9)
            self.assertLessEqual(c2y, hi + 1e-9)
            prev_end = [x1, y1]

    def test_coincident_points_are_ignored(self) -> None:
        self.assertEqual(_path([0, 0, 10], [0, 0, 10]), "M0,0L10,10")

    def test_series_path_maps_through_scales(self) -> None:
        series = SeriesData(x=np.asarray([0.0, 1.0, 2.0]), y=np.asarray([0.0, np.nan, 10.0]))
        x_scale = LinearScale(domain=(0.0, 2.0), range=(0.0, 100.0))
        y_scale = LinearScale(domain=(0.0, 10.0), range=(50.0, 0.0))
        self.assertEqual(series_path(series, x_scale, y_scale), "M0,50ZM100,0Z")

    def test_output_is_deterministic(self) -> None:
        rng = np.random.default_rng(7)
        xs = np.arange(200, dtype=np.float64)
        ys = rng.normal(size=200)
        mask = np.ones(200, dtype=bool)
        self.assertEqual(monotone_x_path(xs, ys, mask), monotone_x_path(xs.copy(), ys.copy(), mask.copy()))


if __name__ == "__main__":
    unittest.main()
