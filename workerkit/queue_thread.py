"""A worker thread that executes queued callables in order."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Deque, Optional

from workerkit.threadbase import ThreadBase

Task = Callable[[], object]


class QueueThread(ThreadBase):
    """Runs submitted tasks one at a time, first in first out.

    The worker starts as soon as the object is created.
    """

    def __init__(self) -> None:
        self._tasks: Deque[Task] = deque()
        self._cond = threading.Condition()
        super().__init__()
        self.start()

    @property
    def pending(self) -> int:
        """Number of tasks waiting to be run."""
        return len(self._tasks)

    def put(self, task: Task) -> None:
        """Queue a callable taking no arguments."""
        if not callable(task):
            raise TypeError(f"task must be callable, not {type(task).__name__}")
        with self._cond:
            self._tasks.append(task)
            self._cond.notify()

    def _interrupt(self) -> None:
        with self._cond:
            self._cond.notify_all()

    def _next_task(self) -> Optional[Task]:
        """Block until a task is available; None once stopped with nothing left."""
        with self._cond:
            self._cond.wait_for(lambda: not self._running or bool(self._tasks))
            return self._tasks.popleft() if self._tasks else None

    def run(self) -> None:
        while self._running:
            task = self._next_task()
            if task is None:
                return
            task()