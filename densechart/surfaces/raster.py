from __future__ import annotations

from functools import lru_cache
import math
from pathlib import Path as FilePath
import re

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from densechart.commands import Clear, DrawCommandList, Line, Path, Text


_PATH_TOKEN = re.compile(r"([MLCZ])([^MLCZ]*)")
_CURVE_STEPS = 12


class RasterSurface:
    """Rasterizes a command list at view-box size, one pixel per unit."""

    def __init__(self, background: str = "#FFFFFF", scale: float = 1.0) -> None:
        if scale <= 0:
            raise ValueError("scale must be > 0")
        self.background = background
        self.scale = scale
        self.image: Image.Image | None = None
        self._draw: ImageDraw.ImageDraw | None = None
        self._origin = (0.0, 0.0)

    def apply(self, drawing: DrawCommandList) -> None:
        for command in drawing.commands:
            if isinstance(command, Clear) or self._draw is None:
                self._reset(drawing)
            if isinstance(command, Line):
                self._line(command)
            elif isinstance(command, Text):
                self._text(command)
            elif isinstance(command, Path):
                self._path(command)

    def to_rgba(self) -> np.ndarray:
        if self.image is None:
            raise RuntimeError("nothing has been drawn")
        return np.asarray(self.image, dtype=np.uint8)

    def save(self, path: FilePath) -> None:
        if self.image is None:
            raise RuntimeError("nothing has been drawn")
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path, format="PNG")

    def _reset(self, drawing: DrawCommandList) -> None:
        _, _, w, h = drawing.view_box
        size = (max(1, int(math.ceil(w * self.scale))), max(1, int(math.ceil(h * self.scale))))
        self.image = Image.new("RGBA", size, self.background)
        self._draw = ImageDraw.Draw(self.image)
        self._origin = drawing.origin

    def _px(self, x: float, y: float) -> tuple[float, float]:
        ox, oy = self._origin
        return ((x + ox) * self.scale, (y + oy) * self.scale)

    def _width(self, stroke_width: float) -> int:
        return max(1, int(round(stroke_width * self.scale)))

    def _line(self, command: Line) -> None:
        assert self._draw is not None
        self._draw.line(
            [self._px(command.x1, command.y1), self._px(command.x2, command.y2)],
            fill=command.stroke,
            width=self._width(command.stroke_width),
        )

    def _text(self, command: Text) -> None:
        assert self._draw is not None
        font = _load_font(command.font_size * self.scale)
        left, top, right, bottom = self._draw.textbbox((0, 0), command.text, font=font)
        w = right - left
        h = bottom - top
        x, y = self._px(command.x, command.y)
        if command.anchor == "middle":
            x -= w / 2.0
        elif command.anchor == "end":
            x -= w
        if command.baseline == "middle":
            y -= h / 2.0
        elif command.baseline == "auto":
            y -= h
        self._draw.text((x - left, y - top), command.text, fill=command.fill, font=font)

    def _path(self, command: Path) -> None:
        assert self._draw is not None
        width = self._width(command.stroke_width)
        for points in flatten_path(command.d):
            pixels = [self._px(x, y) for x, y in points]
            if len(pixels) == 1:
                self._draw.point(pixels, fill=command.stroke)
            else:
                self._draw.line(pixels, fill=command.stroke, width=width, joint="curve")


def flatten_path(d: str) -> list[list[tuple[float, float]]]:
    """Split M/L/C/Z path data into polylines, approximating curves."""
    subpaths: list[list[tuple[float, float]]] = []
    current: list[tuple[float, float]] = []
    for op, args in _PATH_TOKEN.findall(d):
        nums = [float(v) for v in re.split(r"[\s,]+", args.strip()) if v]
        if op == "M":
            if current:
                subpaths.append(current)
            current = [(nums[0], nums[1])]
        elif op == "L":
            current.append((nums[0], nums[1]))
        elif op == "C":
            p0 = current[-1]
            p1, p2, p3 = (nums[0], nums[1]), (nums[2], nums[3]), (nums[4], nums[5])
            for i in range(1, _CURVE_STEPS + 1):
                current.append(_cubic(p0, p1, p2, p3, i / _CURVE_STEPS))
    if current:
        subpaths.append(current)
    return subpaths


def _cubic(
    p0: tuple[float, float],
    p1: tuple[float, float],
    p2: tuple[float, float],
    p3: tuple[float, float],
    t: float,
) -> tuple[float, float]:
    u = 1.0 - t
    a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
        a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
    )


@lru_cache(maxsize=16)
def _load_font(size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    return ImageFont.load_default(size=max(1.0, size_px))
