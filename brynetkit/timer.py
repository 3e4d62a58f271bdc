"""One-shot and repeating timers driven by a priority queue."""

from __future__ import annotations

import functools
import heapq
import itertools
import threading
import time
from typing import Any, Callable, Optional


class Timer:
    """A callback due ``duration`` seconds after ``start_time``.

    The callback runs at most once; cancelling before it runs drops it.
    """

    def __init__(
        self,
        start_time: float,
        duration: float,
        callback: Optional[Callable[[], Any]],
    ) -> None:
        self.start_time = start_time
        self.duration = duration
        self._callback = callback
        self._lock = threading.Lock()
        self._done = False

    @property
    def deadline(self) -> float:
        return self.start_time + self.duration

    def left_time(self) -> float:
        """Seconds until the timer is due; negative once it has passed."""
        return self.duration - (time.monotonic() - self.start_time)

    def _take(self) -> Optional[Callable[[], Any]]:
        with self._lock:
            if self._done:
                return None
            self._done = True
            callback, self._callback = self._callback, None
            return callback

    def cancel(self) -> None:
        """Prevent the callback from running if it has not run yet."""
        self._take()

    def __call__(self) -> None:
        callback = self._take()
        if callback is not None:
            callback()


class RepeatTimer:
    """Handle used to stop a repeating timer."""

    def __init__(self) -> None:
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()

    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()


class TimerManager:
    """Holds pending timers and runs those that are due."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Timer]] = []
        self._counter = itertools.count()

    def push(self, timer: Timer) -> None:
        """Queue an existing timer."""
        heapq.heappush(self._heap, (timer.deadline, next(self._counter), timer))

    def add_timer(self, timeout: float, callback: Callable[..., Any], *args: Any) -> Timer:
        """Run ``callback(*args)`` once after ``timeout`` seconds."""
        timer = Timer(time.monotonic(), timeout, functools.partial(callback, *args))
        self.push(timer)
        return timer

    def add_interval_timer(
        self, interval: float, callback: Callable[..., Any], *args: Any
    ) -> RepeatTimer:
        """Run ``callback(*args)`` every ``interval`` seconds until cancelled."""
        repeat = RepeatTimer()
        bound = functools.partial(callback, *args)
        self.add_timer(interval, self._repeat, interval, bound, repeat)
        return repeat

    def _repeat(
        self, interval: float, callback: Callable[[], Any], repeat: RepeatTimer
    ) -> None:
        if repeat.is_cancelled():
            return
        callback()
        self.add_timer(interval, self._repeat, interval, callback, repeat)

    def schedule(self) -> None:
        """Run every timer that is due, earliest first."""
        while self._heap:
            timer = self._heap[0][2]
            if timer.left_time() > 0:
                break
            heapq.heappop(self._heap)
            timer()

    def is_empty(self) -> bool:
        return not self._heap

    def near_left_time(self) -> float:
        """Seconds until the earliest timer is due; 0 if none or overdue."""
        if not self._heap:
            return 0.0
        return max(0.0, self._heap[0][2].left_time())

    def clear(self) -> None:
        self._heap.clear()