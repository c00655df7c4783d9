from __future__ import annotations

from typing import Protocol

from densechart.commands import DrawCommandList


class DrawingSurface(Protocol):
    """Presentation layer that applies a rendered command list."""

    def apply(self, drawing: DrawCommandList) -> None:
        ...
