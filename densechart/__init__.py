from densechart.adapters import classify_series, split_series
from densechart.commands import Clear, DrawCommandList, Line, Path, Text
from densechart.config import DEFAULT_RENDER_CONFIG, Margins, RenderConfig
from densechart.descriptors import Chart, load_charts, parse_charts
from densechart.errors import ChartDataError
from densechart.pipeline import render
from densechart.resize import AsyncioScheduler, ResizeCoordinator
from densechart.scales import ContainerSize, LinearScale
from densechart.surfaces import RasterSurface, SvgSurface
from densechart.view import ChartView, FixedContainer

__all__ = [
    "AsyncioScheduler",
    "Chart",
    "ChartDataError",
    "ChartView",
    "Clear",
    "ContainerSize",
    "DEFAULT_RENDER_CONFIG",
    "DrawCommandList",
    "FixedContainer",
    "Line",
    "LinearScale",
    "Margins",
    "Path",
    "RasterSurface",
    "RenderConfig",
    "ResizeCoordinator",
    "SvgSurface",
    "Text",
    "classify_series",
    "load_charts",
    "parse_charts",
    "render",
    "split_series",
]
