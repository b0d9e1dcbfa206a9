"""A one-shot or periodic timer driven by its own worker thread."""

from __future__ import annotations

import math
import threading
import time
from abc import abstractmethod

from workerkit.threadbase import ThreadBase

SEC_TO_MILLI = 1000


class Timer(ThreadBase):
    """Calls :meth:`on_timeout` each time the armed timer expires.

    Times are given in milliseconds.  Expirations that pile up while the
    worker is busy or not started are reported by a single callback.
    """

    def __init__(self) -> None:
        super().__init__()
        self._cond = threading.Condition()
        self._deadline: float | None = None
        self._interval = 0.0

    def set_timer(self, delay, interval=0) -> None:
        """Arm the timer to expire after ``delay`` ms, then every ``interval`` ms.

        A delay of zero disarms the timer; an interval of zero makes it one-shot.
        """
        if delay < 0 or interval < 0:
            raise ValueError("timer delay and interval must not be negative")
        with self._cond:
            self._interval = interval / SEC_TO_MILLI
            if delay == 0:
                self._deadline = None
            else:
                self._deadline = time.monotonic() + delay / SEC_TO_MILLI
            self._cond.notify_all()

    def get_timer(self) -> int:
        """Milliseconds until the next expiration, or 0 if none is due."""
        with self._cond:
            if self._deadline is None:
                return 0
            now = time.monotonic()
            remaining = self._deadline - now
            if remaining > 0:
                return int(remaining * SEC_TO_MILLI)
            if self._interval == 0:
                return 0
            return int((self._next_deadline(now) - now) * SEC_TO_MILLI)

    def start(self) -> None:
        """Start delivering expirations."""
        super().start()

    def stop(self) -> None:
        """Disarm the timer and stop the worker thread."""
        with self._cond:
            self._deadline = None
            self._interval = 0.0
        super().stop()

    def _interrupt(self) -> None:
        with self._cond:
            self._cond.notify_all()

    def _next_deadline(self, now: float) -> float:
        assert self._deadline is not None
        periods = math.floor((now - self._deadline) / self._interval) + 1
        return self._deadline + periods * self._interval

    def _due(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def _wait_time(self) -> float | None:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def _consume(self) -> None:
        if self._interval:
            self._deadline = self._next_deadline(time.monotonic())
        else:
            self._deadline = None

    def run(self) -> None:
        while self._running:
            with self._cond:
                while self._running and not self._due():
                    self._cond.wait(self._wait_time())
                if not self._running:
                    break
                self._consume()
            if self._running:
                self.on_timeout()

    @abstractmethod
    def on_timeout(self) -> None:
        """Called on the worker thread whenever the timer expires."""