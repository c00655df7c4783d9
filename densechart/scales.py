from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
import math
import re
import sys
from typing import Sequence

import numpy as np

from densechart.config import RenderConfig
from densechart.series import SeriesData


_E10 = math.sqrt(50.0)
_E5 = math.sqrt(10.0)
_E2 = math.sqrt(2.0)
_FLOAT_MAX = sys.float_info.max
_FIXED_FORMAT = re.compile(r"\.(\d+)f")


@dataclass(frozen=True)
class ContainerSize:
    width: float
    height: float


@dataclass(frozen=True)
class PlotSize:
    width: float
    height: float


@dataclass(frozen=True)
class LinearScale:
    """Linear map from ``domain`` onto ``range``; the domain never has zero width."""

    domain: tuple[float, float]
    range: tuple[float, float]

    def __post_init__(self) -> None:
        d0, d1 = self.domain
        if not (math.isfinite(d0) and math.isfinite(d1)):
            raise ValueError("scale domain must be finite")
        if d0 == d1:
            raise ValueError("scale domain must have nonzero width")

    def __call__(self, value: float) -> float:
        r0, r1 = self.range
        return r0 + self._unit(float(value)) * (r1 - r0)

    def map_array(self, values: np.ndarray) -> np.ndarray:
        r0, r1 = self.range
        return r0 + self._unit(np.asarray(values, dtype=np.float64)) * (r1 - r0)

    def ticks(self, count: int) -> list[float]:
        return nice_ticks(self.domain[0], self.domain[-1], count)

    def _unit(self, values: np.ndarray | float) -> np.ndarray | float:
        d0, d1 = self.domain
        if math.isfinite(d1 - d0):
            return (values - d0) / (d1 - d0)
        # Halving is exact and keeps spans near the float limit finite.
        return (values / 2.0 - d0 / 2.0) / (d1 / 2.0 - d0 / 2.0)


def resolve_plot_size(container: ContainerSize, config: RenderConfig) -> PlotSize:
    container_h = container.height if container.height > 0 else config.fallback_container_height
    width = max(container.width - config.margins.horizontal, config.min_plot_width)
    height = max(container_h - config.margins.vertical, config.min_plot_height)
    return PlotSize(width=float(width), height=float(height))


def build_x_scale(series: Sequence[SeriesData], plot: PlotSize) -> LinearScale | None:
    chunks = [s.x for s in series if len(s) > 0]
    if not chunks:
        return None
    xs = np.concatenate(chunks)
    xmin = float(np.min(xs))
    xmax = float(np.max(xs))
    if xmin == xmax:
        xmin, xmax = padded_domain(xmin, xmax, 1.0)
    return LinearScale(domain=(xmin, xmax), range=(0.0, plot.width))


def build_y_scale(series: Sequence[SeriesData], plot: PlotSize, pad_fraction: float) -> LinearScale | None:
    chunks = [s.y[s.defined] for s in series]
    finite = np.concatenate(chunks) if chunks else np.empty(0, dtype=np.float64)
    if finite.size == 0:
        return None
    ymin = float(np.min(finite))
    ymax = float(np.max(finite))
    if ymin == ymax:
        pad = max(1.0, abs(ymin) * pad_fraction)
    else:
        pad = (ymax / 2.0 - ymin / 2.0) * pad_fraction * 2.0
    return LinearScale(domain=padded_domain(ymin, ymax, pad), range=(plot.height, 0.0))


def padded_domain(lo: float, hi: float, pad: float) -> tuple[float, float]:
    """``(lo - pad, hi + pad)`` clamped to finite floats and strictly wider than ``[lo, hi]``."""
    d0 = lo - pad
    d1 = hi + pad
    if not math.isfinite(d0):
        d0 = -_FLOAT_MAX
    elif d0 >= lo:
        d0 = max(math.nextafter(lo, -math.inf), -_FLOAT_MAX)
    if not math.isfinite(d1):
        d1 = _FLOAT_MAX
    elif d1 <= hi:
        d1 = min(math.nextafter(hi, math.inf), _FLOAT_MAX)
    return d0, d1


def nice_ticks(start: float, stop: float, count: int) -> list[float]:
    """Round tick values covering [start, stop], about ``count`` of them."""
    if not count > 0:
        return []
    if start == stop:
        return [float(start)]
    if not math.isfinite(stop - start):
        return [t * 2.0 for t in nice_ticks(start / 2.0, stop / 2.0, count)]
    reverse = stop < start
    lo, hi = (stop, start) if reverse else (start, stop)
    i1, i2, inc = _tick_spec(lo, hi, count)
    if not i2 >= i1:
        return []
    if inc < 0:
        ticks = [(i1 + i) / -inc for i in range(i2 - i1 + 1)]
    else:
        ticks = [(i1 + i) * inc for i in range(i2 - i1 + 1)]
    if reverse:
        ticks.reverse()
    return [float(t) for t in ticks]


def format_tick(value: float, spec: str) -> str:
    """Format a tick value; fixed-point specs round halves away from zero."""
    fixed = _FIXED_FORMAT.fullmatch(spec)
    if fixed is not None and math.isfinite(value):
        places = int(fixed.group(1))
        exact = Decimal(value)
        context = Context(prec=max(1, exact.adjusted() + 1) + places + 1)
        out = f"{exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=context):f}"
    else:
        out = format(value, spec)
    # Negative zero reads as noise on an axis.
    if out.startswith("-") and float(out) == 0.0:
        out = out[1:]
    return out


def _tick_spec(start: float, stop: float, count: float) -> tuple[int, int, float]:
    step = (stop - start) / max(0.0, count)
    power = math.floor(math.log10(step))
    error = step / (10.0**power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power < 0:
        inc = (10.0 ** -power) / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = (10.0**power) * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
