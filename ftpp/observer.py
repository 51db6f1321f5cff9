"""Event subscription and notification."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Generic, Hashable, TypeVar

E = TypeVar("E", bound=Hashable)


class Observer(Generic[E]):
    """Maps events to callbacks, run in subscription order on notify."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[E, list[Callable[[], None]]] = defaultdict(list)

    def subscribe(self, event: E, callback: Callable[[], None]) -> None:
        self._subscribers[event].append(callback)

    def notify(self, event: E) -> None:
        """Call every callback subscribed to ``event``; unknown events do nothing."""
        for callback in tuple(self._subscribers.get(event, ())):
            callback()