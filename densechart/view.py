from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from densechart.commands import DrawCommandList
from densechart.config import DEFAULT_RENDER_CONFIG, RenderConfig
from densechart.pipeline import render
from densechart.resize import Container, ResizeCoordinator, ResizeListener, Scheduler
from densechart.scales import ContainerSize
from densechart.surfaces.base import DrawingSurface


LOGGER = logging.getLogger(__name__)


class FixedContainer:
    """In-memory container whose size only changes through ``resize``."""

    def __init__(self, width: float, height: float) -> None:
        self._size = ContainerSize(width=float(width), height=float(height))
        self._listeners: list[ResizeListener] = []

    def measure(self) -> ContainerSize:
        return self._size

    def add_resize_listener(self, listener: ResizeListener) -> None:
        self._listeners.append(listener)

    def remove_resize_listener(self, listener: ResizeListener) -> None:
        self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def resize(self, width: float, height: float) -> None:
        self._size = ContainerSize(width=float(width), height=float(height))
        for listener in list(self._listeners):
            listener()


class ChartView:
    """Event shell around ``render``: mount, data change, debounced resize."""

    def __init__(
        self,
        container: Container,
        surface: DrawingSurface,
        *,
        config: RenderConfig = DEFAULT_RENDER_CONFIG,
        scheduler: Scheduler | None = None,
        name: str = "chart",
    ) -> None:
        self._container = container
        self._surface = surface
        self._config = config
        self._name = name
        self._data: Sequence[Any] | None = None
        self._mounted = False
        self._disposed = False
        self._last: DrawCommandList | None = None
        self.render_count = 0
        self._resize = ResizeCoordinator(
            container,
            self._on_resize,
            scheduler=scheduler,
            delay_s=config.debounce_s,
        )

    @property
    def last_drawing(self) -> DrawCommandList | None:
        return self._last

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self, data: Sequence[Any] | None) -> DrawCommandList:
        self._ensure_alive()
        self._data = data
        self._resize.start()
        self._mounted = True
        return self._render(self._container.measure())

    def set_data(self, data: Sequence[Any] | None) -> DrawCommandList | None:
        self._ensure_alive()
        self._data = data
        if not self._mounted:
            return None
        return self._render(self._container.measure())

    def dispose(self) -> None:
        if self._disposed:
            return
        self._resize.dispose()
        self._disposed = True
        self._mounted = False

    def _ensure_alive(self) -> None:
        if self._disposed:
            raise RuntimeError(f"{self._name} is disposed")

    def _on_resize(self, size: ContainerSize) -> None:
        if self._disposed:
            LOGGER.debug("%s: dropped resize after dispose", self._name)
            return
        self._render(size)

    def _render(self, size: ContainerSize) -> DrawCommandList:
        drawing = render(self._data, size, self._config)
        self._surface.apply(drawing)
        self._last = drawing
        self.render_count += 1
        for index, stats in enumerate(drawing.stats):
            LOGGER.debug(
                "%s series %d: original=%d sampled=%d filtered=%d final=%d fallback=%s",
                self._name,
                index,
                stats.original,
                stats.sampled,
                stats.filtered,
                stats.final,
                stats.fallback,
            )
        return drawing
