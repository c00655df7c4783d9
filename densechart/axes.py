from __future__ import annotations

from densechart.commands import DrawCommand, Line, Text
from densechart.config import RenderConfig
from densechart.scales import LinearScale, PlotSize, format_tick


def x_axis_commands(scale: LinearScale, plot: PlotSize, config: RenderConfig) -> list[DrawCommand]:
    """Bottom axis: domain line, tick marks and ``.0f``-style labels."""
    y0 = plot.height
    out: list[DrawCommand] = [
        Line(0.0, y0, plot.width, y0, stroke=config.axis_color, stroke_width=1.0, layer="axis"),
    ]
    for value in scale.ticks(config.x_ticks):
        x = scale(value)
        out.append(Line(x, y0, x, y0 + config.tick_size, stroke=config.axis_color, stroke_width=1.0, layer="axis"))
        out.append(
            Text(
                x,
                y0 + config.tick_size + 3.0,
                format_tick(value, config.x_tick_format),
                fill=config.text_color,
                font_size=config.axis_font_size,
                anchor="middle",
                layer="axis",
                baseline="hanging",
            )
        )
    return out


def y_axis_commands(scale: LinearScale, plot: PlotSize, config: RenderConfig) -> list[DrawCommand]:
    out: list[DrawCommand] = [
        Line(0.0, 0.0, 0.0, plot.height, stroke=config.axis_color, stroke_width=1.0, layer="axis"),
    ]
    for value in scale.ticks(config.y_ticks):
        y = scale(value)
        out.append(Line(-config.tick_size, y, 0.0, y, stroke=config.axis_color, stroke_width=1.0, layer="axis"))
        out.append(
            Text(
                -config.tick_size - 3.0,
                y,
                format_tick(value, config.y_tick_format),
                fill=config.text_color,
                font_size=config.axis_font_size,
                anchor="end",
                layer="axis",
                baseline="middle",
            )
        )
    return out


def x_grid_commands(scale: LinearScale, plot: PlotSize, config: RenderConfig) -> list[DrawCommand]:
    return [
        Line(scale(v), 0.0, scale(v), plot.height, stroke=config.grid_color, stroke_width=1.0, layer="grid")
        for v in scale.ticks(config.x_ticks)
    ]


def y_grid_commands(scale: LinearScale, plot: PlotSize, config: RenderConfig) -> list[DrawCommand]:
    return [
        Line(0.0, scale(v), plot.width, scale(v), stroke=config.grid_color, stroke_width=1.0, layer="grid")
        for v in scale.ticks(config.y_ticks)
    ]
