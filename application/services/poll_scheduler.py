"""Periodic driver for poll cycles."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Optional

from core.logging.logger import get_logger


@dataclass(slots=True)
class SchedulerStatus:
    running: bool
    interval_seconds: float
    cycles_completed: int
    ticks_skipped: int
    last_cycle_started_at: Optional[datetime]
    last_cycle_finished_at: Optional[datetime]


class PollScheduler:
    """Fires ``run_cycle`` immediately, then once per interval.

    A tick that arrives while the previous cycle is still in flight is
    skipped, so cycles never overlap. ``stop()`` cancels both the timer and
    any running cycle.
    """

    def __init__(self, run_cycle: Callable[[], Awaitable[Any]], interval_seconds: float = 15.0) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._run_cycle = run_cycle
        self.interval_seconds = interval_seconds
        self._ticker: Optional[asyncio.Task] = None
        self._cycle: Optional[asyncio.Task] = None
        self.cycles_completed = 0
        self.ticks_skipped = 0
        self.last_cycle_started_at: Optional[datetime] = None
        self.last_cycle_finished_at: Optional[datetime] = None
        self._log = get_logger(__name__, service="scheduler")

    @property
    def running(self) -> bool:
        return self._ticker is not None and not self._ticker.done()

    @property
    def cycle_in_progress(self) -> bool:
        return self._cycle is not None and not self._cycle.done()

    def start(self) -> None:
        if self.running:
            return
        self._log.info(lambda: f"starting, interval={self.interval_seconds}s")
        self._ticker = asyncio.create_task(self._tick_forever(), name="poll-ticker")

    async def stop(self) -> None:
        tasks = [t for t in (self._ticker, self._cycle) if t is not None and not t.done()]
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._ticker = None
        self._cycle = None
        self._log.info("stopped")

    def tick(self) -> bool:
        """Start a cycle unless one is already running. Returns True if started."""
        if self.cycle_in_progress:
            self.ticks_skipped += 1
            self._log.warning("previous cycle still running, tick skipped")
            return False
        self._cycle = asyncio.create_task(self._guarded_cycle(), name="poll-cycle")
        return True

    async def _tick_forever(self) -> None:
        while True:
            self.tick()
            await asyncio.sleep(self.interval_seconds)

    async def _guarded_cycle(self) -> None:
        self.last_cycle_started_at = datetime.now(timezone.utc)
        try:
            await self._run_cycle()
        except asyncio.CancelledError:
            self._log.info("cycle cancelled")
            raise
        except Exception:
            self._log.exception("poll cycle crashed")
        else:
            self.cycles_completed += 1
        finally:
            self.last_cycle_finished_at = datetime.now(timezone.utc)

    def status(self) -> SchedulerStatus:
        return SchedulerStatus(
            running=self.running,
            interval_seconds=self.interval_seconds,
            cycles_completed=self.cycles_completed,
            ticks_skipped=self.ticks_skipped,
            last_cycle_started_at=self.last_cycle_started_at,
            last_cycle_finished_at=self.last_cycle_finished_at,
        )
