from __future__ import annotations

import asyncio
from typing import Callable, Protocol

from densechart.config import DEFAULT_DEBOUNCE_S
from densechart.scales import ContainerSize


ResizeListener = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class Container(Protocol):
    """Host element a chart is drawn into."""

    def measure(self) -> ContainerSize:
        ...

    def add_resize_listener(self, listener: ResizeListener) -> None:
        ...

    def remove_resize_listener(self, listener: ResizeListener) -> None:
        ...


class AsyncioScheduler:
    """Schedules debounce timers on an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        return loop.call_later(delay_s, callback)


class ResizeCoordinator:
    """Collapses bursts of resize signals into one callback per quiet period.

    Only the last signal of a burst counts; the container is measured when the
    timer fires. ``dispose`` removes the listener and drops the pending timer.
    """

    def __init__(
        self,
        container: Container,
        on_resize: Callable[[ContainerSize], None],
        *,
        scheduler: Scheduler | None = None,
        delay_s: float = DEFAULT_DEBOUNCE_S,
    ) -> None:
        if delay_s < 0:
            raise ValueError("delay_s must be >= 0")
        self._container = container
        self._on_resize = on_resize
        self._scheduler: Scheduler = scheduler if scheduler is not None else AsyncioScheduler()
        self._delay_s = delay_s
        self._pending: TimerHandle | None = None
        self._generation = 0
        self._started = False
        self._disposed = False

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def start(self) -> None:
        if self._disposed:
            raise RuntimeError("resize coordinator is disposed")
        if self._started:
            return
        self._container.add_resize_listener(self.notify)
        self._started = True

    def notify(self) -> None:
        if self._disposed:
            return
        self._cancel_pending()
        self._generation += 1
        generation = self._generation
        self._pending = self._scheduler.call_later(self._delay_s, lambda: self._fire(generation))

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if self._started:
            self._container.remove_resize_listener(self.notify)
            self._started = False
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _fire(self, generation: int) -> None:
        # A cancelled handle may still run on some schedulers; ignore stale ones.
        if self._disposed or generation != self._generation:
            return
        self._pending = None
        self._on_resize(self._container.measure())
