from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from densechart.errors import ChartDataError
from densechart.series import SeriesData, SeriesShape


def classify_series(raw: Sequence[Any] | None) -> SeriesShape | None:
    """Decide the series shape from the first element; None for empty input."""
    if raw is None or len(raw) == 0:
        return None
    _, value = _unpack_pair(raw[0], index=0)
    if _is_multi_value(value):
        return SeriesShape(kind="multi", arity=len(value))
    return SeriesShape(kind="single", arity=1)


def split_series(raw: Sequence[Any], shape: SeriesShape) -> list[SeriesData]:
    n = len(raw)
    x = np.empty(n, dtype=np.float64)
    y = np.full((shape.arity, n), np.nan, dtype=np.float64)
    for i, entry in enumerate(raw):
        x_raw, value = _unpack_pair(entry, index=i)
        x[i] = _coerce_x(x_raw, index=i)
        if shape.is_multi:
            if not _is_multi_value(value):
                raise ChartDataError(f"mixed value shapes: scalar at index {i} in a multi-series")
            if len(value) != shape.arity:
                raise ChartDataError(f"series arity mismatch at index {i}: {len(value)} != {shape.arity}")
            for k, v in enumerate(value):
                y[k, i] = _coerce_y(v)
        else:
            if _is_multi_value(value):
                raise ChartDataError(f"mixed value shapes: array at index {i} in a single series")
            y[0, i] = _coerce_y(value)
    return [SeriesData(x=x, y=y[k]) for k in range(shape.arity)]


def _is_multi_value(value: Any) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


def _unpack_pair(entry: Any, *, index: int) -> tuple[Any, Any]:
    if not isinstance(entry, (list, tuple, np.ndarray)) or len(entry) != 2:
        raise ChartDataError(f"entry at index {index} is not an [x, y] pair: {entry!r}")
    return entry[0], entry[1]


def _coerce_x(raw: Any, *, index: int) -> float:
    if isinstance(raw, bool) or raw is None:
        raise ChartDataError(f"x at index {index} is not numeric: {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ChartDataError(f"x at index {index} is not numeric: {raw!r}") from exc
    if not np.isfinite(value):
        raise ChartDataError(f"x at index {index} is not finite: {raw!r}")
    return value


def _coerce_y(raw: Any) -> float:
    # Anything that is not a real number becomes a gap.
    if raw is None or isinstance(raw, (bool, str, bytes)):
        return np.nan
    try:
        return float(raw)
    except (TypeError, ValueError, OverflowError):
        return np.nan
