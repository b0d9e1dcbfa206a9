"""Base class for objects that own a single worker thread."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod


class ThreadBase(ABC):
    """Owns one worker thread that executes :meth:`run` while running.

    Subclasses implement :meth:`run` and are expected to return from it
    once :attr:`running` turns false.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._running = False
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the worker is meant to keep running."""
        return self._running

    def start(self) -> None:
        """Start the worker thread unless it is already running."""
        with self._lock:
            if not self._running:
                self._running = True
                self._thread = threading.Thread(
                    target=self.run, name=type(self).__name__, daemon=True
                )
                self._thread.start()

    def stop(self) -> None:
        """Ask the worker to finish and wait for its thread to exit."""
        with self._lock:
            self._running = False
            self._interrupt()
            thread = self._thread
        if (
            thread is not None
            and thread is not threading.current_thread()
            and thread.is_alive()
        ):
            thread.join()

    def _interrupt(self) -> None:
        """Wake a worker that may be blocked; called by :meth:`stop`."""

    @abstractmethod
    def run(self) -> None:
        """Body of the worker thread."""

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()