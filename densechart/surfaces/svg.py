from __future__ import annotations

from pathlib import Path as FilePath
import xml.etree.ElementTree as ET

from densechart.commands import Clear, DrawCommand, DrawCommandList, Line, Path, Text


SVG_NS = "http://www.w3.org/2000/svg"


class SvgSurface:
    """Keeps the current drawing as a responsive SVG document."""

    def __init__(self, title: str | None = None) -> None:
        self.title = title
        self._root: ET.Element | None = None
        self._plot: ET.Element | None = None
        self.applied = 0

    def apply(self, drawing: DrawCommandList) -> None:
        for command in drawing.commands:
            if isinstance(command, Clear):
                self._reset(drawing)
                continue
            if self._plot is None:
                self._reset(drawing)
            assert self._plot is not None
            self._plot.append(_element(command))
        self.applied += 1

    def markup(self) -> str:
        if self._root is None:
            return ""
        return ET.tostring(self._root, encoding="unicode")

    def write(self, path: FilePath) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.markup(), encoding="utf-8")

    def _reset(self, drawing: DrawCommandList) -> None:
        x, y, w, h = drawing.view_box
        root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": "100%",
                "height": "100%",
                "viewBox": f"{_num(x)} {_num(y)} {_num(w)} {_num(h)}",
                "preserveAspectRatio": "xMidYMid meet",
            },
        )
        if self.title:
            ET.SubElement(root, "title").text = self.title
        left, top = drawing.origin
        self._plot = ET.SubElement(root, "g", {"transform": f"translate({_num(left)},{_num(top)})"})
        self._root = root


def _element(command: DrawCommand) -> ET.Element:
    if isinstance(command, Line):
        return ET.Element(
            "line",
            {
                "class": command.layer,
                "x1": _num(command.x1),
                "y1": _num(command.y1),
                "x2": _num(command.x2),
                "y2": _num(command.y2),
                "stroke": command.stroke,
                "stroke-width": _num(command.stroke_width),
            },
        )
    if isinstance(command, Text):
        attrs = {
            "class": command.layer,
            "x": _num(command.x),
            "y": _num(command.y),
            "fill": command.fill,
            "font-size": f"{_num(command.font_size)}px",
            "text-anchor": command.anchor,
        }
        if command.baseline != "auto":
            attrs["dominant-baseline"] = command.baseline
        elem = ET.Element("text", attrs)
        elem.text = command.text
        return elem
    if isinstance(command, Path):
        return ET.Element(
            "path",
            {
                "class": command.layer,
                "d": command.d,
                "fill": "none",
                "stroke": command.stroke,
                "stroke-width": _num(command.stroke_width),
            },
        )
    raise TypeError(f"unsupported draw command: {command!r}")


def _num(value: float) -> str:
    out = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if out == "-0" else out
