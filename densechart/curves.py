from __future__ import annotations

import math

import numpy as np

from densechart.scales import LinearScale
from densechart.series import SeriesData


def series_path(series: SeriesData, x_scale: LinearScale, y_scale: LinearScale) -> str:
    """SVG path data for one series; undefined points split it into subpaths."""
    defined = series.defined
    px = x_scale.map_array(series.x)
    py = np.where(defined, y_scale.map_array(np.where(defined, series.y, 0.0)), np.nan)
    return monotone_x_path(px, py, defined)


def monotone_x_path(xs: np.ndarray, ys: np.ndarray, defined: np.ndarray) -> str:
    """Monotone cubic interpolation in x (Steffen slopes), emitted as M/L/C/Z.

    The curve never overshoots the y range of two neighbouring points.
    """
    writer = _MonotoneXWriter()
    in_line = False
    for x, y, ok in zip(xs.tolist(), ys.tolist(), defined.tolist()):
        if ok and not in_line:
            writer.line_start()
            in_line = True
        elif not ok and in_line:
            writer.line_end()
            in_line = False
        if ok:
            writer.point(float(x), float(y))
    if in_line:
        writer.line_end()
    return "".join(writer.parts)


class _MonotoneXWriter:
    def __init__(self) -> None:
        self.parts: list[str] = []
        self._reset()

    def _reset(self) -> None:
        self._x0 = self._x1 = self._y0 = self._y1 = self._t0 = math.nan
        self._point = 0

    def line_start(self) -> None:
        self._reset()

    def line_end(self) -> None:
        if self._point == 2:
            self.parts.append(f"L{_num(self._x1)},{_num(self._y1)}")
        elif self._point == 3:
            self._bezier(self._t0, self._slope2(self._t0))
        if self._point == 1:
            self.parts.append("Z")

    def point(self, x: float, y: float) -> None:
        if x == self._x1 and y == self._y1:
            return
        t1 = math.nan
        if self._point == 0:
            self._point = 1
            self.parts.append(f"M{_num(x)},{_num(y)}")
        elif self._point == 1:
            self._point = 2
        elif self._point == 2:
            self._point = 3
            t1 = self._slope3(x, y)
            self._bezier(self._slope2(t1), t1)
        else:
            t1 = self._slope3(x, y)
            self._bezier(self._t0, t1)
        self._x0, self._x1 = self._x1, x
        self._y0, self._y1 = self._y1, y
        self._t0 = t1

    def _bezier(self, t0: float, t1: float) -> None:
        x0, y0, x1, y1 = self._x0, self._y0, self._x1, self._y1
        dx = (x1 - x0) / 3.0
        self.parts.append(
            f"C{_num(x0 + dx)},{_num(y0 + dx * t0)},"
            f"{_num(x1 - dx)},{_num(y1 - dx * t1)},"
            f"{_num(x1)},{_num(y1)}"
        )

    def _slope2(self, t: float) -> float:
        h = self._x1 - self._x0
        if h == 0 or math.isnan(h):
            return t
        return (3.0 * (self._y1 - self._y0) / h - t) / 2.0

    def _slope3(self, x2: float, y2: float) -> float:
        h0 = self._x1 - self._x0
        h1 = x2 - self._x1
        s0 = _div(self._y1 - self._y0, h0 if h0 else (-0.0 if h1 < 0 else 0.0))
        s1 = _div(y2 - self._y1, h1 if h1 else (-0.0 if h0 < 0 else 0.0))
        p = _div(s0 * h1 + s1 * h0, h0 + h1)
        bounds = (abs(s0), abs(s1), 0.5 * abs(p))
        if any(math.isnan(b) for b in bounds):
            return 0.0
        slope = (_sign(s0) + _sign(s1)) * min(bounds)
        if math.isnan(slope):
            return 0.0
        return slope


def _div(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _sign(value: float) -> int:
    return -1 if value < 0 else 1


def _num(value: float) -> str:
    out = f"{value:.3f}".rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out
