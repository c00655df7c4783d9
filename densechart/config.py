from __future__ import annotations

from dataclasses import dataclass


DEFAULT_TARGET_POINTS = 200
DEFAULT_OUTLIER_MULTIPLIER = 1.5
DEFAULT_FALLBACK_THRESHOLD = 50
DEFAULT_X_TICKS = 10
DEFAULT_Y_TICKS = 8
DEFAULT_DEBOUNCE_S = 0.100
DEFAULT_MIN_PLOT_WIDTH = 300
DEFAULT_MIN_PLOT_HEIGHT = 200
DEFAULT_FALLBACK_CONTAINER_HEIGHT = 400
DEFAULT_PALETTE: tuple[tuple[str, str], ...] = (
    ("#2196F3", "Series 1"),
    ("#4CAF50", "Series 2"),
    ("#F44336", "Series 3"),
    ("#FF9800", "Series 4"),
    ("#9C27B0", "Series 5"),
    ("#00BCD4", "Series 6"),
    ("#795548", "Series 7"),
    ("#607D8B", "Series 8"),
)


@dataclass(frozen=True)
class Margins:
    top: int = 40
    right: int = 120
    bottom: int = 50
    left: int = 80

    def __post_init__(self) -> None:
        if min(self.top, self.right, self.bottom, self.left) < 0:
            raise ValueError("margins must be >= 0")

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


@dataclass(frozen=True)
class RenderConfig:
    """Fixed rendering constants for one chart pass."""

    margins: Margins = Margins()
    min_plot_width: int = DEFAULT_MIN_PLOT_WIDTH
    min_plot_height: int = DEFAULT_MIN_PLOT_HEIGHT
    fallback_container_height: int = DEFAULT_FALLBACK_CONTAINER_HEIGHT
    target_points: int = DEFAULT_TARGET_POINTS
    outlier_multiplier: float = DEFAULT_OUTLIER_MULTIPLIER
    fallback_threshold: int = DEFAULT_FALLBACK_THRESHOLD
    x_ticks: int = DEFAULT_X_TICKS
    y_ticks: int = DEFAULT_Y_TICKS
    x_tick_format: str = ".0f"
    y_tick_format: str = ".3f"
    tick_size: float = 6.0
    single_y_padding: float = 0.10
    multi_y_padding: float = 0.15
    debounce_s: float = DEFAULT_DEBOUNCE_S
    palette: tuple[tuple[str, str], ...] = DEFAULT_PALETTE
    stroke_width: float = 0.8
    legend_row_spacing: float = 20.0
    legend_inset: float = 100.0
    legend_swatch_length: float = 20.0
    legend_label_offset: float = 25.0
    font_size: float = 12.0
    axis_font_size: float = 10.0
    axis_color: str = "#000000"
    grid_color: str = "#E0E0E0"
    text_color: str = "#000000"

    def __post_init__(self) -> None:
        if self.min_plot_width <= 0 or self.min_plot_height <= 0:
            raise ValueError("min_plot_width/min_plot_height must be > 0")
        if self.fallback_container_height <= 0:
            raise ValueError("fallback_container_height must be > 0")
        if self.target_points <= 0:
            raise ValueError("target_points must be > 0")
        if self.outlier_multiplier < 0:
            raise ValueError("outlier_multiplier must be >= 0")
        if self.fallback_threshold < 0:
            raise ValueError("fallback_threshold must be >= 0")
        if self.x_ticks <= 0 or self.y_ticks <= 0:
            raise ValueError("x_ticks/y_ticks must be > 0")
        if self.single_y_padding <= 0 or self.multi_y_padding <= 0:
            raise ValueError("y padding fractions must be > 0")
        if self.debounce_s < 0:
            raise ValueError("debounce_s must be >= 0")
        if not self.palette:
            raise ValueError("palette must not be empty")

    def series_style(self, index: int) -> tuple[str, str]:
        """Return (color, label) for the series at ``index``.

        Colors cycle once the palette is exhausted; labels keep counting.
        """
        color, label = self.palette[index % len(self.palette)]
        if index >= len(self.palette):
            label = f"Series {index + 1}"
        return color, label


DEFAULT_RENDER_CONFIG = RenderConfig()
