"""Observer interface and a subject that notifies attached observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List


class Observer(ABC):
    """Something that wants to be told when a subject changes."""

    @abstractmethod
    def update(self, params: Any) -> None:
        """Receive a notification carrying ``params``."""


class Subject:
    """Keeps a list of observers and notifies them in attachment order."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    def __len__(self) -> int:
        return len(self._observers)

    def attach(self, observer: Observer) -> None:
        """Add an observer; attaching it again makes it notified again."""
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove every attachment of ``observer``; unknown observers are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self, params: Any = None) -> None:
        """Call ``update(params)`` on every attached observer."""
        for observer in list(self._observers):
            observer.update(params)