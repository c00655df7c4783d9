from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from densechart.adapters import classify_series, split_series
from densechart.axes import x_axis_commands, x_grid_commands, y_axis_commands, y_grid_commands
from densechart.commands import Clear, DrawCommand, DrawCommandList, Path
from densechart.config import DEFAULT_RENDER_CONFIG, RenderConfig
from densechart.curves import series_path
from densechart.legend import legend_commands
from densechart.reduce import filter_outliers, stride_sample
from densechart.scales import ContainerSize, build_x_scale, build_y_scale, resolve_plot_size
from densechart.series import SeriesData, SeriesStats


def render(
    raw: Sequence[Any] | None,
    container: ContainerSize,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> DrawCommandList:
    """Run classify -> sample -> filter -> scale -> paths for one chart.

    Pure: the same input and container always produce an identical list.
    """
    plot = resolve_plot_size(container, config)
    margins = config.margins
    view_box = (0.0, 0.0, plot.width + margins.horizontal, plot.height + margins.vertical)
    origin = (float(margins.left), float(margins.top))

    shape = classify_series(raw)
    if raw is None or shape is None:
        return DrawCommandList(view_box=view_box, origin=origin, commands=(Clear(),))

    finals, stats = reduce_series(split_series(raw, shape), length=len(raw), config=config)
    pad = config.multi_y_padding if shape.is_multi else config.single_y_padding
    x_scale = build_x_scale(finals, plot)
    y_scale = build_y_scale(finals, plot, pad)
    if x_scale is None or y_scale is None:
        return DrawCommandList(view_box=view_box, origin=origin, commands=(Clear(),), stats=stats)

    commands: list[DrawCommand] = [Clear()]
    commands.extend(x_axis_commands(x_scale, plot, config))
    commands.extend(y_axis_commands(y_scale, plot, config))
    commands.extend(x_grid_commands(x_scale, plot, config))
    commands.extend(y_grid_commands(y_scale, plot, config))
    if shape.is_multi:
        commands.extend(legend_commands(shape.arity, plot, config))
    for index, final in enumerate(finals):
        d = series_path(final, x_scale, y_scale)
        if not d:
            continue
        color, _ = config.series_style(index)
        commands.append(Path(d=d, stroke=color, stroke_width=config.stroke_width, series_index=index))
    return DrawCommandList(view_box=view_box, origin=origin, commands=tuple(commands), stats=stats)


def reduce_series(
    series: Sequence[SeriesData],
    *,
    length: int,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> tuple[list[SeriesData], tuple[SeriesStats, ...]]:
    """Sample every series on shared indices, then drop outliers per series."""
    finals: list[SeriesData] = []
    stats: list[SeriesStats] = []
    for s in series:
        sampled = stride_sample(s, config.target_points, length=length)
        result = filter_outliers(
            sampled,
            multiplier=config.outlier_multiplier,
            fallback_threshold=config.fallback_threshold,
        )
        finals.append(result.data)
        stats.append(
            SeriesStats(
                original=len(s),
                sampled=len(sampled),
                filtered=result.kept,
                final=len(result.data),
                fallback=result.fallback,
            )
        )
    return finals, tuple(stats)
