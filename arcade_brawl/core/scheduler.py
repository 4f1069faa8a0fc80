"""
Tick Scheduler
==============
One simulated millisecond clock driving every timer in a match.

Periodic tasks run in the order they were registered; one-shot timers
(state reversions, cooldown releases) fire before periodic tasks that are
due at the same instant, in the order they were scheduled.
"""

import heapq
import itertools
from dataclasses import dataclass
from typing import Callable, List, Tuple

# Heap ordering groups for events due at the same instant
_ONE_SHOT = 0
_PERIODIC = 1


@dataclass
class TimerHandle:
    """Handle for a one-shot timer"""
    due_ms: int
    callback: Callable[[], None]
    name: str = ""
    cancelled: bool = False
    fired: bool = False

    def cancel(self):
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


@dataclass
class PeriodicTask:
    """A task re-run every period_ms"""
    name: str
    period_ms: int
    callback: Callable[[], None]
    order: int
    next_due_ms: int = 0
    runs: int = 0
    cancelled: bool = False

    def cancel(self):
        self.cancelled = True

    def set_period(self, period_ms: int):
        """Takes effect from the next scheduled run"""
        if period_ms <= 0:
            raise ValueError(f"Period must be positive, got {period_ms}")
        self.period_ms = period_ms


class Scheduler:
    """
    Single-threaded cooperative scheduler.
    Time only moves through advance(); pause() freezes it, stop() ends it.
    """

    def __init__(self):
        self._now_ms = 0
        self._queue: List[Tuple[int, int, int, object]] = []
        self._seq = itertools.count()
        self._tasks: List[PeriodicTask] = []
        self._paused = False
        self._stopped = False

    @property
    def now(self) -> int:
        return self._now_ms

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    @property
    def tasks(self) -> List[PeriodicTask]:
        return list(self._tasks)

    def add_periodic(self, name: str, period_ms: int,
                     callback: Callable[[], None]) -> PeriodicTask:
        """Register a periodic task. First run is one period from now."""
        if period_ms <= 0:
            raise ValueError(f"Period must be positive, got {period_ms}")

        task = PeriodicTask(
            name=name,
            period_ms=period_ms,
            callback=callback,
            order=len(self._tasks),
            next_due_ms=self._now_ms + period_ms,
        )
        self._tasks.append(task)
        if not self._stopped:
            self._push(task.next_due_ms, _PERIODIC, task.order, task)
        return task

    def call_later(self, delay_ms: int, callback: Callable[[], None],
                   name: str = "") -> TimerHandle:
        """Schedule a one-shot callback. Ignored (returned cancelled) once stopped."""
        handle = TimerHandle(
            due_ms=self._now_ms + max(0, int(delay_ms)),
            callback=callback,
            name=name,
        )
        if self._stopped:
            handle.cancelled = True
            return handle

        self._push(handle.due_ms, _ONE_SHOT, next(self._seq), handle)
        return handle

    def advance(self, ms: float):
        """Move the clock forward, firing everything that comes due."""
        if self._paused or self._stopped or ms <= 0:
            return

        target = self._now_ms + int(ms)

        while self._queue and self._queue[0][0] <= target:
            due, group, _, entry = heapq.heappop(self._queue)
            self._now_ms = due

            if group == _ONE_SHOT:
                if entry.cancelled:
                    continue
                entry.fired = True
                entry.callback()
            else:
                if entry.cancelled:
                    continue
                entry.runs += 1
                entry.callback()
                # Callback may have stopped the scheduler or cancelled itself
                if not entry.cancelled and not self._stopped:
                    entry.next_due_ms = due + entry.period_ms
                    self._push(entry.next_due_ms, _PERIODIC, entry.order, entry)

            if self._stopped or self._paused:
                return

        self._now_ms = target

    def pause(self):
        self._paused = True

    def resume(self):
        """Resume without replaying the paused interval"""
        self._paused = False

    def stop(self):
        """Cancel every pending timer and task permanently"""
        self._stopped = True
        for _, _, _, entry in self._queue:
            entry.cancel()
        self._queue.clear()

    def pending(self) -> int:
        """Number of live one-shot timers"""
        return sum(
            1 for _, group, _, entry in self._queue
            if group == _ONE_SHOT and not entry.cancelled
        )

    def _push(self, due: int, group: int, order: int, entry):
        heapq.heappush(self._queue, (due, group, order, entry))
