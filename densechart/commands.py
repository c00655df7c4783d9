from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from densechart.series import SeriesStats


Layer = Literal["axis", "grid", "legend", "data"]
TextAnchor = Literal["start", "middle", "end"]


@dataclass(frozen=True)
class Clear:
    """Remove everything a previous pass drew."""


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float
    layer: Layer


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    fill: str
    font_size: float
    anchor: TextAnchor
    layer: Layer
    baseline: Literal["auto", "middle", "hanging"] = "auto"


@dataclass(frozen=True)
class Path:
    d: str
    stroke: str
    stroke_width: float
    series_index: int
    layer: Layer = "data"


DrawCommand = Union[Clear, Line, Text, Path]


@dataclass(frozen=True)
class DrawCommandList:
    """Output of one render pass, in plot coordinates offset by ``origin``."""

    view_box: tuple[float, float, float, float]
    origin: tuple[float, float]
    commands: tuple[DrawCommand, ...]
    stats: tuple[SeriesStats, ...] = ()

    @property
    def is_blank(self) -> bool:
        return all(isinstance(cmd, Clear) for cmd in self.commands)

    def of_type(self, kind: type) -> list:
        return [cmd for cmd in self.commands if isinstance(cmd, kind)]

    def paths(self) -> list[Path]:
        return self.of_type(Path)
