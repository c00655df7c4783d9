from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from densechart.series import SeriesData


@dataclass(frozen=True)
class OutlierBounds:
    q1: float
    q3: float
    lower: float
    upper: float

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def contains(self, values: np.ndarray) -> np.ndarray:
        return (values >= self.lower) & (values <= self.upper)


@dataclass(frozen=True)
class FilterResult:
    data: SeriesData
    bounds: OutlierBounds | None
    kept: int
    fallback: bool


def sample_stride(length: int, target: int) -> int:
    if target <= 0:
        raise ValueError("target must be > 0")
    if length < 0:
        raise ValueError("length must be >= 0")
    return max(1, length // target)


def sample_indices(length: int, target: int) -> np.ndarray:
    return np.arange(0, length, sample_stride(length, target), dtype=np.intp)


def stride_sample(series: SeriesData, target: int, *, length: int | None = None) -> SeriesData:
    """Keep every stride-th point starting at index 0.

    ``length`` overrides the length the stride is derived from, so parallel
    series of one chart can share the same indices.
    """
    n = len(series) if length is None else length
    stride = sample_stride(n, target)
    if stride == 1:
        return series
    return series.take(np.arange(0, len(series), stride, dtype=np.intp))


def outlier_bounds(values: np.ndarray, multiplier: float) -> OutlierBounds | None:
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return None
    q1, q3 = np.quantile(finite, [0.25, 0.75])
    iqr = float(q3 - q1)
    return OutlierBounds(
        q1=float(q1),
        q3=float(q3),
        lower=float(q1) - multiplier * iqr,
        upper=float(q3) + multiplier * iqr,
    )


def filter_outliers(series: SeriesData, *, multiplier: float, fallback_threshold: int) -> FilterResult:
    """Drop points outside the IQR bounds, keeping gaps in place.

    When no more than ``fallback_threshold`` defined points survive, the input
    is returned unchanged.
    """
    bounds = outlier_bounds(series.y, multiplier)
    if bounds is None:
        return FilterResult(data=series, bounds=None, kept=0, fallback=True)
    inside = bounds.contains(series.y)
    kept = int(np.count_nonzero(inside))
    if kept <= fallback_threshold:
        return FilterResult(data=series, bounds=bounds, kept=kept, fallback=True)
    keep = inside | ~series.defined
    return FilterResult(data=series.take(np.flatnonzero(keep)), bounds=bounds, kept=kept, fallback=False)
