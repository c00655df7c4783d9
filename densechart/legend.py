from __future__ import annotations

from densechart.commands import DrawCommand, Line, Text
from densechart.config import RenderConfig
from densechart.scales import PlotSize


def legend_commands(arity: int, plot: PlotSize, config: RenderConfig) -> list[DrawCommand]:
    """One swatch+label row per series, stacked down from the top-right inset."""
    x0 = plot.width - config.legend_inset
    out: list[DrawCommand] = []
    for i in range(arity):
        color, label = config.series_style(i)
        row_y = i * config.legend_row_spacing
        out.append(
            Line(
                x0,
                row_y,
                x0 + config.legend_swatch_length,
                row_y,
                stroke=color,
                stroke_width=config.stroke_width,
                layer="legend",
            )
        )
        out.append(
            Text(
                x0 + config.legend_label_offset,
                row_y + 4.0,
                label,
                fill=config.text_color,
                font_size=config.font_size,
                anchor="start",
                layer="legend",
            )
        )
    return out
