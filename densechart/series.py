from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np


SeriesKind = Literal["single", "multi"]


@dataclass(frozen=True)
class SeriesShape:
    kind: SeriesKind
    arity: int

    @property
    def is_multi(self) -> bool:
        return self.kind == "multi"


@dataclass(frozen=True)
class SeriesData:
    """One series in input order; NaN in ``y`` marks a gap."""

    x: np.ndarray
    y: np.ndarray

    def __len__(self) -> int:
        return int(self.x.size)

    @property
    def defined(self) -> np.ndarray:
        return np.isfinite(self.y)

    def finite_count(self) -> int:
        return int(np.count_nonzero(self.defined))

    def take(self, indices: np.ndarray) -> "SeriesData":
        return SeriesData(x=self.x[indices], y=self.y[indices])


@dataclass(frozen=True)
class SeriesStats:
    original: int
    sampled: int
    filtered: int
    final: int
    fallback: bool
