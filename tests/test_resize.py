from __future__ import annotations

import asyncio
from dataclasses import dataclass
import unittest
from typing import Callable

from densechart.resize import AsyncioScheduler, ResizeCoordinator
from densechart.scales import ContainerSize
from densechart.view import FixedContainer


@dataclass
class _Timer:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class _ManualScheduler:
    def __init__(self, honour_cancel: bool = True) -> None:
        self.now = 0.0
        self.timers: list[_Timer] = []
        self._honour_cancel = honour_cancel

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> _Timer:
        timer = _Timer(due=self.now + delay_s, callback=callback)
        self.timers.append(timer)
        return timer

    def advance(self, dt: float) -> None:
        self.now += dt
        due = [t for t in self.timers if t.due <= self.now + 1e-12]
        self.timers = [t for t in self.timers if t not in due]
        for timer in sorted(due, key=lambda t: t.due):
            if timer.cancelled and self._honour_cancel:
                continue
            timer.callback()

    def live_timers(self) -> int:
        return sum(1 for t in self.timers if not t.cancelled)


class ResizeCoordinatorTests(unittest.TestCase):
    def _build(self, honour_cancel: bool = True):
        container = FixedContainer(800, 400)
        scheduler = _ManualScheduler(honour_cancel=honour_cancel)
        calls: list[ContainerSize] = []
        coordinator = ResizeCoordinator(container, calls.append, scheduler=scheduler, delay_s=0.1)
        coordinator.start()
        return container, scheduler, calls, coordinator

    def test_burst_collapses_to_one_call_with_last_size(self) -> None:
        container, scheduler, calls, _ = self._build()
        for i in range(6):
            container.resize(800 + i * 10, 400 + i)
            scheduler.advance(0.05)
        self.assertEqual(calls, [])
        scheduler.advance(0.1)
        self.assertEqual(calls, [ContainerSize(850.0, 405.0)])
        self.assertEqual(scheduler.live_timers(), 0)

    def test_quiet_gaps_produce_separate_calls(self) -> None:
        container, scheduler, calls, _ = self._build()
        container.resize(500, 300)
        scheduler.advance(0.15)
        container.resize(600, 300)
        scheduler.advance(0.15)
        self.assertEqual([c.width for c in calls], [500.0, 600.0])

    def test_dispose_unsubscribes_and_cancels_pending_timer(self) -> None:
        container, scheduler, calls, coordinator = self._build()
        container.resize(900, 500)
        self.assertTrue(coordinator.pending)
        coordinator.dispose()
        self.assertEqual(container.listener_count, 0)
        self.assertFalse(coordinator.pending)
        scheduler.advance(1.0)
        container.resize(100, 100)
        scheduler.advance(1.0)
        self.assertEqual(calls, [])

    def test_dispose_is_idempotent_and_final(self) -> None:
        _, _, _, coordinator = self._build()
        coordinator.dispose()
        coordinator.dispose()
        self.assertTrue(coordinator.disposed)
        with self.assertRaises(RuntimeError):
            coordinator.start()

    def test_stale_timers_are_ignored_when_cancel_is_not_honoured(self) -> None:
        container, scheduler, calls, coordinator = self._build(honour_cancel=False)
        container.resize(700, 300)
        scheduler.advance(0.02)
        container.resize(710, 300)
        scheduler.advance(0.2)
        self.assertEqual(calls, [ContainerSize(710.0, 300.0)])
        container.resize(720, 300)
        coordinator.dispose()
        scheduler.advance(0.2)
        self.assertEqual(len(calls), 1)

    def test_start_subscribes_once(self) -> None:
        container, _, _, coordinator = self._build()
        coordinator.start()
        self.assertEqual(container.listener_count, 1)

    def test_rejects_negative_delay(self) -> None:
        with self.assertRaises(ValueError):
            ResizeCoordinator(FixedContainer(1, 1), lambda size: None, delay_s=-0.1)


class AsyncioSchedulerTests(unittest.TestCase):
    def test_debounce_on_event_loop(self) -> None:
        calls: list[ContainerSize] = []

        async def scenario() -> None:
            container = FixedContainer(640, 480)
            coordinator = ResizeCoordinator(container, calls.append, scheduler=AsyncioScheduler(), delay_s=0.02)
            coordinator.start()
            for width in (650, 660, 670):
                container.resize(width, 480)
                await asyncio.sleep(0)
            await asyncio.sleep(0.1)
            container.resize(999, 480)
            coordinator.dispose()
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        self.assertEqual(calls, [ContainerSize(670.0, 480.0)])


if __name__ == "__main__":
    unittest.main()
