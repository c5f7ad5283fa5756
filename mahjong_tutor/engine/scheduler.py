"""Single-threaded cooperative scheduler for delayed bot actions.

All game callbacks run on the thread that calls run_due(). Other threads
(the advice worker) hand work over with call_soon_threadsafe().
"""

import heapq
import itertools
import threading
import time
from collections import deque
from typing import Callable, Optional


class ManualClock:
    """Virtual clock for tests; time only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds

    def advance_to(self, when: float):
        self.now = max(self.now, when)


class ScheduledTask:
    """Handle for a delayed callback."""

    def __init__(self, when: float, callback: Callable[[], None], label: str = ""):
        self.when = when
        self.callback = callback
        self.label = label
        self.cancelled = False
        self.done = False

    def cancel(self):
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.done)

    def __repr__(self):
        state = "cancelled" if self.cancelled else "done" if self.done else "pending"
        return f"ScheduledTask({self.label or self.callback!r}, at={self.when:.2f}, {state})"


class Scheduler:
    """Timer queue stepped explicitly by its owner."""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self.clock = clock or time.monotonic
        self._timers = []
        self._seq = itertools.count()
        self._inbox = deque()
        self._lock = threading.Lock()

    def call_later(self, delay: float, callback: Callable[[], None],
                   label: str = "") -> ScheduledTask:
        task = ScheduledTask(self.clock() + max(delay, 0.0), callback, label)
        heapq.heappush(self._timers, (task.when, next(self._seq), task))
        return task

    def call_soon_threadsafe(self, callback: Callable[[], None]):
        """Queue callback from any thread; it runs on the next run_due()."""
        with self._lock:
            self._inbox.append(callback)

    def cancel_all(self):
        for _, _, task in self._timers:
            task.cancel()
        self._timers.clear()

    @property
    def pending(self) -> int:
        with self._lock:
            inbox = len(self._inbox)
        return inbox + sum(1 for _, _, task in self._timers if task.active)

    def time_until_next(self) -> Optional[float]:
        """Seconds until something is runnable, or None when idle."""
        with self._lock:
            if self._inbox:
                return 0.0
        self._drop_cancelled()
        if not self._timers:
            return None
        return max(self._timers[0][0] - self.clock(), 0.0)

    def run_due(self) -> int:
        """Run queued thread handoffs and every timer that is due. Returns count run."""
        ran = 0
        while True:
            with self._lock:
                if not self._inbox:
                    break
                callback = self._inbox.popleft()
            callback()
            ran += 1

        now = self.clock()
        while self._timers and self._timers[0][0] <= now:
            _, _, task = heapq.heappop(self._timers)
            if task.cancelled:
                continue
            task.done = True
            task.callback()
            ran += 1
        return ran

    def run_until_idle(self, max_steps: int = 10000) -> int:
        """Run everything, jumping a ManualClock forward or sleeping on a real one."""
        ran = 0
        for _ in range(max_steps):
            wait = self.time_until_next()
            if wait is None:
                break
            if wait > 0:
                if isinstance(self.clock, ManualClock):
                    self.clock.advance_to(self._timers[0][0])
                else:
                    time.sleep(wait)
            ran += self.run_due()
        return ran

    def _drop_cancelled(self):
        while self._timers and self._timers[0][2].cancelled:
            heapq.heappop(self._timers)
